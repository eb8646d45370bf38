"""Tests for outcome measure classification."""

import pytest

from trialpico.classifiers.endpoint import (
    classify_endpoint,
    classify_outcome,
    outcome_classification_agrees,
)
from trialpico.config.endpoint_rules import load_endpoint_rules
from trialpico.models.categories import EndpointType
from trialpico.models.trial import Outcome


class TestClassifyEndpoint:
    """Tests for classify_endpoint."""

    @pytest.mark.parametrize(
        "measure, expected",
        [
            ("Overall Survival (OS)", EndpointType.OS),
            ("Progression-Free Survival", EndpointType.PFS),
            ("EORTC QLQ-C30 score", EndpointType.QOL_PRO),
            ("Incidence of Grade 3+ AEs", EndpointType.SAFETY),
            ("Random free-text endpoint", EndpointType.OTHER),
        ],
    )
    def test_reference_measures(self, measure, expected):
        assert classify_endpoint(measure) == expected

    @pytest.mark.parametrize(
        "measure, expected",
        [
            ("Disease-free survival", EndpointType.DFS),
            ("Event-Free Survival (EFS)", EndpointType.EFS),
            ("Relapse-free survival", EndpointType.RFS),
            ("Objective Response Rate (ORR) per RECIST 1.1", EndpointType.ORR),
            ("Clinical benefit rate", EndpointType.CBR),
            ("Disease control rate", EndpointType.DCR),
            ("Duration of response", EndpointType.DOR),
            ("Time to progression", EndpointType.TTP),
            ("Time to next treatment", EndpointType.TTF),
            ("MRD negativity rate", EndpointType.MRD),
            ("Health-related quality of life", EndpointType.QOL_PRO),
            ("Number of participants with dose-limiting toxicities", EndpointType.SAFETY),
            ("PD-L1 expression", EndpointType.BIOMARKER),
            ("Maximum plasma concentration (Cmax)", EndpointType.PK_PD),
            ("Number of hospitalizations", EndpointType.RESOURCE_USE),
        ],
    )
    def test_taxonomy_coverage(self, measure, expected):
        assert classify_endpoint(measure) == expected

    def test_pathologic_complete_response_before_complete_response(self):
        """pCR must not be swallowed by the CR rule."""
        assert classify_endpoint("Pathological complete response (pCR)") == EndpointType.PCR
        assert classify_endpoint("Complete remission rate") == EndpointType.CR

    def test_generic_time_to_endpoint(self):
        assert classify_endpoint("Time to deterioration") == EndpointType.TTP

    def test_time_to_treatment_not_caught_by_fallback(self):
        assert classify_endpoint("Time to treatment discontinuation") == EndpointType.OTHER

    def test_overall_survival_wins_over_later_rules(self):
        """First match wins: OS is evaluated before safety."""
        assert classify_endpoint("Overall survival and incidence of adverse events") == EndpointType.OS

    def test_abbreviations_need_word_boundaries(self):
        """'os' inside 'dose' and 'pro' inside 'progress' are not matches."""
        assert classify_endpoint("Recommended dose") == EndpointType.OTHER
        assert classify_endpoint("OS at 24 months") == EndpointType.OS
        assert classify_endpoint("PRO questionnaire completion") == EndpointType.QOL_PRO

    def test_case_insensitive(self):
        assert classify_endpoint("OVERALL SURVIVAL") == EndpointType.OS
        assert classify_endpoint("overall survival") == EndpointType.OS

    @pytest.mark.parametrize("measure", [None, "", "   "])
    def test_missing_measure_is_other(self, measure):
        assert classify_endpoint(measure) == EndpointType.OTHER

    def test_deterministic(self):
        measure = "Progression-free survival assessed by BICR"
        assert classify_endpoint(measure) == classify_endpoint(measure)


class TestOutcomeClassification:
    """Tests for classify_outcome and upstream agreement."""

    def test_upstream_classification_ignored(self):
        outcome = Outcome(measure="Overall survival", classification="PFS")
        assert classify_outcome(outcome) == EndpointType.OS

    def test_agreement_case_insensitive(self):
        assert outcome_classification_agrees(Outcome(measure="Overall survival", classification="OS"))
        assert outcome_classification_agrees(Outcome(measure="Overall survival", classification="os"))

    def test_disagreement(self):
        outcome = Outcome(measure="Overall survival", classification="PFS")
        assert not outcome_classification_agrees(outcome)

    def test_missing_upstream_counts_as_agreeing(self):
        assert outcome_classification_agrees(Outcome(measure="Overall survival"))


class TestEndpointRuleTable:
    """Tests for the YAML rule table."""

    def test_every_type_except_other_has_a_rule(self):
        categories = set(load_endpoint_rules().categories())
        expected = {t for t in EndpointType if t != EndpointType.OTHER}
        assert categories == expected

    def test_overall_survival_evaluated_first(self):
        assert load_endpoint_rules().rules[0].category == EndpointType.OS

    def test_loader_is_cached(self):
        assert load_endpoint_rules() is load_endpoint_rules()
