"""Shared fixtures for trialpico tests."""

import pytest

from trialpico.models.trial import Arm, Outcome, Trial


def placebo_arm() -> Arm:
    return Arm(
        label="Placebo",
        type="PLACEBO_COMPARATOR",
        description="Matching placebo tablets once daily",
        is_control=True,
        control_type="Placebo",
    )


def active_arm() -> Arm:
    return Arm(
        label="Docetaxel",
        type="ACTIVE_COMPARATOR",
        description="Docetaxel 75 mg/m2 every 3 weeks",
        is_control=True,
        control_type="Active Comparator",
    )


def soc_arm() -> Arm:
    return Arm(
        label="Investigator's choice",
        type="ACTIVE_COMPARATOR",
        description="Chemotherapy of investigator's choice",
        is_control=True,
        control_type="Standard of Care",
    )


def experimental_arm(description: str = "Drug X 200 mg once daily") -> Arm:
    return Arm(
        label="Drug X",
        type="EXPERIMENTAL",
        description=description,
        control_type="Experimental",
    )


@pytest.fixture
def make_trial():
    """Factory for trials with outcome measures given as plain strings."""

    def _make(
        nct_id: str = "NCT00000001",
        phase: str | None = "Phase 3",
        arms: list[Arm] | None = None,
        primary: list[str] | tuple[str, ...] = (),
        secondary: list[str] | tuple[str, ...] = (),
    ) -> Trial:
        return Trial(
            nct_id=nct_id,
            phase=phase,
            arms=arms or [],
            primary_outcomes=[Outcome(measure=m) for m in primary],
            secondary_outcomes=[Outcome(measure=m) for m in secondary],
        )

    return _make


@pytest.fixture
def placebo_controlled_trial(make_trial) -> Trial:
    """Phase 3 trial: Drug X vs placebo, OS primary, PFS and QoL secondary."""
    return make_trial(
        nct_id="NCT00000010",
        arms=[experimental_arm(), placebo_arm()],
        primary=["Overall Survival (OS)"],
        secondary=["Progression-Free Survival", "EORTC QLQ-C30 score"],
    )


@pytest.fixture
def active_controlled_trial(make_trial) -> Trial:
    """Phase 3 trial: Drug X vs docetaxel, PFS primary."""
    return make_trial(
        nct_id="NCT00000020",
        arms=[experimental_arm(), active_arm()],
        primary=["Progression-Free Survival"],
        secondary=["Overall Survival"],
    )


@pytest.fixture
def registry_study() -> dict:
    """ClinicalTrials.gov API v2 study document."""
    return {
        "protocolSection": {
            "identificationModule": {
                "nctId": "NCT02578680",
                "briefTitle": "Pembrolizumab plus chemotherapy vs placebo plus chemotherapy in NSCLC",
            },
            "designModule": {"phases": ["PHASE3"]},
            "armsInterventionsModule": {
                "armGroups": [
                    {
                        "label": "Pembrolizumab + Chemotherapy",
                        "type": "EXPERIMENTAL",
                        "description": "Pembrolizumab in combination with pemetrexed and platinum",
                        "interventionNames": ["Biological: Pembrolizumab", "Drug: Pemetrexed"],
                    },
                    {
                        "label": "Placebo + Chemotherapy",
                        "type": "PLACEBO_COMPARATOR",
                        "description": "Saline placebo in combination with pemetrexed and platinum",
                        "interventionNames": ["Drug: Placebo", "Drug: Pemetrexed"],
                    },
                ]
            },
            "outcomesModule": {
                "primaryOutcomes": [
                    {"measure": "Overall Survival (OS)", "timeFrame": "Up to 5 years"},
                    {"measure": "Progression-free Survival (PFS) per RECIST 1.1", "timeFrame": "Up to 5 years"},
                ],
                "secondaryOutcomes": [
                    {"measure": "Objective Response Rate (ORR)", "timeFrame": "Up to 5 years"},
                    {"measure": "Change from baseline in EORTC QLQ-C30 global health status", "timeFrame": "Week 12"},
                ],
            },
        }
    }
