"""Tests for ClinicalTrials.gov payload parsing."""

import pytest

from trialpico.engine import analyze_pico
from trialpico.ingest.clinicaltrials import (
    TrialPayloadError,
    is_registry_study,
    parse_arm,
    parse_outcome,
    parse_studies,
    parse_study,
)
from trialpico.models.categories import (
    AddOnPrevalence,
    DominantEndpoint,
    PredominantComparator,
    ProsPresence,
    SurrogateUsage,
)


class TestParseStudy:
    """Tests for parse_study."""

    def test_basic_fields(self, registry_study):
        trial = parse_study(registry_study)

        assert trial.nct_id == "NCT02578680"
        assert trial.phase == "PHASE3"
        assert trial.phase_bucket() == "Phase 3"
        assert len(trial.arms) == 2
        assert len(trial.primary_outcomes) == 2
        assert len(trial.secondary_outcomes) == 2

    def test_arm_roles(self, registry_study):
        experimental, placebo = parse_study(registry_study).arms

        assert not experimental.is_control
        assert experimental.control_type == "Experimental"
        assert placebo.is_control
        assert placebo.control_type == "Placebo"
        assert placebo.interventions == ["Drug: Placebo", "Drug: Pemetrexed"]

    def test_outcome_classification_precomputed(self, registry_study):
        trial = parse_study(registry_study)

        assert [o.classification for o in trial.primary_outcomes] == ["OS", "PFS"]
        assert [o.classification for o in trial.secondary_outcomes] == ["ORR", "QoL/PRO"]

    def test_missing_phase(self, registry_study):
        del registry_study["protocolSection"]["designModule"]
        assert parse_study(registry_study).phase == "N/A"

    def test_malformed_study_skipped(self):
        assert parse_study({"protocolSection": {"armsInterventionsModule": {"armGroups": ["bad"]}}}) is None

    def test_analysis_of_parsed_study(self, registry_study):
        result = analyze_pico(parse_studies(registry_study))

        assert result.comparator.predominant_comparator == PredominantComparator.PLACEBO
        assert result.comparator.add_on_prevalence == AddOnPrevalence.PREDOMINANT
        assert result.endpoint.dominant_primary_endpoint == DominantEndpoint.MIXED
        assert result.endpoint.surrogate_usage == SurrogateUsage.PRIMARY_PREDOMINANT
        assert result.endpoint.pros_presence == ProsPresence.RELEVANT


class TestParseArm:
    """Tests for parse_arm."""

    def test_standard_of_care_from_text(self):
        arm = parse_arm({"label": "Best supportive care", "type": "OTHER"})

        assert arm.control_type == "Standard of Care"
        assert not arm.is_control

    def test_no_intervention(self):
        arm = parse_arm({"label": "Observation", "type": "NO_INTERVENTION"})

        assert arm.is_control
        assert arm.control_type == "No Intervention"

    def test_empty_arm(self):
        arm = parse_arm({})

        assert arm.label == ""
        assert arm.control_type is None
        assert not arm.is_control


class TestParseOutcome:
    """Tests for parse_outcome."""

    def test_fields(self):
        outcome = parse_outcome({"measure": "Overall Survival", "timeFrame": "5 years", "description": "Time to death"})

        assert outcome.measure == "Overall Survival"
        assert outcome.time_frame == "5 years"
        assert outcome.classification == "OS"

    def test_missing_measure(self):
        assert parse_outcome({}).classification == "Other"


class TestParseStudies:
    """Tests for parse_studies."""

    def test_search_response(self, registry_study):
        trials = parse_studies({"studies": [registry_study, registry_study]})
        assert len(trials) == 2

    def test_list_skips_non_objects(self, registry_study):
        trials = parse_studies([registry_study, "junk", 42])
        assert [t.nct_id for t in trials] == ["NCT02578680"]

    def test_empty_search_response(self):
        assert parse_studies({"studies": []}) == []

    @pytest.mark.parametrize("payload", ["text", 42, {"foo": "bar"}, None])
    def test_unrecognized_payload(self, payload):
        with pytest.raises(TrialPayloadError):
            parse_studies(payload)

    def test_is_registry_study(self, registry_study):
        assert is_registry_study(registry_study)
        assert not is_registry_study({"nctId": "NCT1"})
        assert not is_registry_study([registry_study])
