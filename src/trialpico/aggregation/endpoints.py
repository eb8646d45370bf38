"""Cross-trial endpoint aggregation.

ARCHITECTURE:
    Trials → classify_outcome (primary + secondary) → per-trial flags
           → dominance / hard endpoint / surrogate usage / PRO presence / consistency

Key Design:
- Outcome types are always re-derived from the measure text
- Dominance counts primary outcomes (not trials) grouped into super-categories
  and requires strictly more than half of all primaries
- Surrogate usage deliberately keeps the historical rule: any trial with a
  surrogate primary yields primary_predominant even below the 50% threshold
- No exceptions: missing evidence degrades to not_evaluable / None
"""

import logging
from collections import Counter
from dataclasses import dataclass

from trialpico.classifiers.endpoint import classify_outcome
from trialpico.constants import (
    ENDPOINT_GROUPS,
    HARD_CLINICAL_ENDPOINTS,
    SURROGATE_ENDPOINTS,
    THRESHOLD_CONSISTENCY_HIGH,
    THRESHOLD_CONSISTENCY_MODERATE,
    THRESHOLD_PREDOMINANT,
    THRESHOLD_RELEVANT,
)
from trialpico.models.analysis import EndpointAnalysis
from trialpico.models.categories import (
    DominantEndpoint,
    EndpointConsistency,
    EndpointType,
    ProsPresence,
    SurrogateUsage,
)
from trialpico.models.trial import Trial
from trialpico.narrative.notes import endpoint_note

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialEndpointProfile:
    """Endpoint facts for a single trial."""

    nct_id: str
    primary_types: tuple[EndpointType, ...]
    secondary_types: tuple[EndpointType, ...]

    @property
    def has_hard_primary(self) -> bool:
        return any(t in HARD_CLINICAL_ENDPOINTS for t in self.primary_types)

    @property
    def has_surrogate_primary(self) -> bool:
        return any(t in SURROGATE_ENDPOINTS for t in self.primary_types)

    @property
    def has_surrogate_secondary(self) -> bool:
        return any(t in SURROGATE_ENDPOINTS for t in self.secondary_types)

    @property
    def has_pro_primary(self) -> bool:
        return EndpointType.QOL_PRO in self.primary_types

    @property
    def has_pro(self) -> bool:
        return self.has_pro_primary or EndpointType.QOL_PRO in self.secondary_types

    @property
    def modal_primary(self) -> EndpointType | None:
        """Most frequent primary type, first seen on ties; None without primaries."""
        if not self.primary_types:
            return None
        return Counter(self.primary_types).most_common(1)[0][0]


def profile_trial(trial: Trial) -> TrialEndpointProfile:
    """Classify every primary and secondary outcome of one trial."""
    return TrialEndpointProfile(
        nct_id=trial.nct_id,
        primary_types=tuple(classify_outcome(o) for o in trial.primary_outcomes),
        secondary_types=tuple(classify_outcome(o) for o in trial.secondary_outcomes),
    )


def _dominant_primary_endpoint(profiles: list[TrialEndpointProfile]) -> DominantEndpoint:
    primary_counts = Counter(t for profile in profiles for t in profile.primary_types)
    total_primary = sum(primary_counts.values())
    if total_primary == 0:
        return DominantEndpoint.NOT_EVALUABLE

    grouped = [
        (group, sum(primary_counts[t] for t in members))
        for group, members in ENDPOINT_GROUPS
    ]
    # First group in ENDPOINT_GROUPS order wins a tie
    leader, leader_count = max(grouped, key=lambda item: item[1])

    if leader_count / total_primary > THRESHOLD_PREDOMINANT:
        return leader
    return DominantEndpoint.MIXED


def _surrogate_usage(profiles: list[TrialEndpointProfile]) -> SurrogateUsage:
    total = len(profiles)
    surrogate_primary = sum(1 for p in profiles if p.has_surrogate_primary)
    surrogate_secondary = sum(1 for p in profiles if p.has_surrogate_secondary)
    proportion = surrogate_primary / total

    if proportion > THRESHOLD_PREDOMINANT:
        return SurrogateUsage.PRIMARY_PREDOMINANT
    if surrogate_primary > 0 or surrogate_secondary > 0:
        # Historical rule: any surrogate primary still reads as primary_predominant
        return SurrogateUsage.PRIMARY_PREDOMINANT if proportion > 0 else SurrogateUsage.SECONDARY
    return SurrogateUsage.NO


def _pros_presence(profiles: list[TrialEndpointProfile]) -> ProsPresence:
    proportion = sum(1 for p in profiles if p.has_pro) / len(profiles)

    if proportion == 0:
        return ProsPresence.NOT_PRESENT
    if any(p.has_pro_primary for p in profiles) or proportion >= THRESHOLD_RELEVANT:
        return ProsPresence.RELEVANT
    return ProsPresence.SECONDARY


def _endpoint_consistency(profiles: list[TrialEndpointProfile]) -> EndpointConsistency:
    modal_types = [p.modal_primary for p in profiles if p.modal_primary is not None]
    if not modal_types:
        return EndpointConsistency.NOT_EVALUABLE

    # Trials without primaries stay in the denominator
    share = Counter(modal_types).most_common(1)[0][1] / len(profiles)

    if share >= THRESHOLD_CONSISTENCY_HIGH:
        return EndpointConsistency.HIGH
    if share >= THRESHOLD_CONSISTENCY_MODERATE:
        return EndpointConsistency.MODERATE
    return EndpointConsistency.LOW


def analyze_endpoints(trials: list[Trial]) -> EndpointAnalysis:
    """Aggregate endpoint structure across trials.

    Args:
        trials: Trials to analyze (may be empty)

    Returns:
        EndpointAnalysis with dominance, hard endpoint, surrogate, PRO and
        consistency fields plus a structural note
    """
    if not trials:
        return EndpointAnalysis()

    profiles = [profile_trial(trial) for trial in trials]
    for profile in profiles:
        logger.debug(
            f"{profile.nct_id or '<no id>'}: primary "
            f"{[t.value for t in profile.primary_types]}"
        )

    dominant = _dominant_primary_endpoint(profiles)
    has_hard = any(p.has_hard_primary for p in profiles)
    surrogate = _surrogate_usage(profiles)
    pros = _pros_presence(profiles)

    return EndpointAnalysis(
        dominant_primary_endpoint=dominant,
        has_hard_clinical_primary=has_hard,
        surrogate_usage=surrogate,
        pros_presence=pros,
        endpoint_consistency=_endpoint_consistency(profiles),
        structural_note=endpoint_note(dominant, has_hard, surrogate, pros),
    )
