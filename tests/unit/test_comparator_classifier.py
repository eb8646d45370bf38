"""Tests for per-arm comparator classification and add-on detection."""

import pytest

from trialpico.classifiers.comparator import (
    arm_has_add_on,
    classify_arm,
    classify_comparator,
    detect_add_on_design,
)
from trialpico.config.comparator_rules import load_comparator_rules
from trialpico.models.categories import ComparatorType
from trialpico.models.trial import Arm


class TestClassifyComparator:
    """Tests for classify_comparator."""

    @pytest.mark.parametrize(
        "hint, expected",
        [
            ("Placebo", ComparatorType.PLACEBO),
            ("PLACEBO_COMPARATOR", ComparatorType.PLACEBO),
            ("SHAM_COMPARATOR", ComparatorType.PLACEBO),
            ("Standard of Care", ComparatorType.STANDARD_OF_CARE),
            ("Best supportive care", ComparatorType.STANDARD_OF_CARE),
            ("Investigator's choice chemotherapy", ComparatorType.STANDARD_OF_CARE),
            ("SOC", ComparatorType.STANDARD_OF_CARE),
            ("ACTIVE_COMPARATOR", ComparatorType.ACTIVE_COMPARATOR),
            ("Active Comparator", ComparatorType.ACTIVE_COMPARATOR),
            ("Active", ComparatorType.ACTIVE_COMPARATOR),
            ("Add-on", ComparatorType.ADD_ON),
            ("NO_INTERVENTION", ComparatorType.NO_INTERVENTION),
        ],
    )
    def test_hint_keywords(self, hint, expected):
        assert classify_comparator(hint) == expected

    def test_placebo_wins_over_standard_of_care(self):
        assert classify_comparator("Placebo plus standard of care") == ComparatorType.PLACEBO

    def test_explicit_active_comparator_wins_over_standard_of_care(self):
        assert classify_comparator("Active comparator (standard of care)") == ComparatorType.ACTIVE_COMPARATOR

    def test_active_control_wins_whichever_phrase_comes_first(self):
        assert classify_comparator("Standard of care (active control)") == ComparatorType.ACTIVE_COMPARATOR
        assert classify_comparator("Standard of care") == ComparatorType.STANDARD_OF_CARE

    def test_soc_needs_word_boundaries(self):
        assert classify_comparator("Associated therapy") == ComparatorType.UNKNOWN

    def test_text_fallback_placebo(self):
        assert classify_comparator("OTHER", "matching placebo tablets") == ComparatorType.PLACEBO

    def test_text_fallback_standard_of_care(self):
        assert classify_comparator("OTHER", "Docetaxel (standard of care)") == ComparatorType.STANDARD_OF_CARE

    def test_text_fallback_is_narrower_than_hint(self):
        """A bare 'active' in free text does not make an active comparator."""
        assert classify_comparator("OTHER", "Patients receive active drug") == ComparatorType.UNKNOWN

    @pytest.mark.parametrize("hint, text", [(None, None), ("", ""), ("OTHER", "")])
    def test_unknown_without_evidence(self, hint, text):
        assert classify_comparator(hint, text) == ComparatorType.UNKNOWN


class TestClassifyArm:
    """Tests for classify_arm."""

    def test_arm_type_used_without_control_type(self):
        arm = Arm(label="Placebo", type="PLACEBO_COMPARATOR")
        assert classify_arm(arm) == ComparatorType.PLACEBO

    def test_control_type_takes_precedence_over_arm_type(self):
        arm = Arm(type="ACTIVE_COMPARATOR", control_type="Standard of Care")
        assert classify_arm(arm) == ComparatorType.STANDARD_OF_CARE

    def test_label_and_description_fallback(self):
        arm = Arm(type="OTHER", label="Control", description="Best supportive care only")
        assert classify_arm(arm) == ComparatorType.STANDARD_OF_CARE


class TestAddOnDetection:
    """Tests for detect_add_on_design."""

    def test_combination_with_background_therapy(self):
        assert detect_add_on_design("administered in combination with standard chemotherapy")

    def test_monotherapy(self):
        assert not detect_add_on_design("single-agent monotherapy")

    @pytest.mark.parametrize(
        "text",
        [
            "Drug X + pembrolizumab",
            "Drug X added to carboplatin",
            "Drug X on top of background therapy",
            "Drug X plus docetaxel",
        ],
    )
    def test_add_on_phrases(self, text):
        assert detect_add_on_design(text)

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_text(self, text):
        assert not detect_add_on_design(text)

    def test_arm_label_is_scanned(self):
        arm = Arm(label="Drug X + Chemotherapy", type="EXPERIMENTAL")
        assert arm_has_add_on(arm)

    def test_add_on_vocabulary_loaded(self):
        phrases = load_comparator_rules().add_on_phrases
        assert "in combination" in phrases
        assert "on top of" in phrases
        assert len(phrases) == 21
