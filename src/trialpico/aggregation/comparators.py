"""Cross-trial comparator aggregation.

ARCHITECTURE:
    Trials → control-like arms → classify_comparator → one representative type per trial
           → predominance / active comparator / add-on prevalence / phase consistency

Key Design:
- Per-trial first: a trial is attributed to a single comparator type using
  COMPARATOR_PRIORITY (active comparator beats SOC beats placebo ...)
- Predominance requires strictly more than half of the classified trials;
  unknown trials are left out of the denominator
- Add-on designs are detected on every arm, not only control arms
- No exceptions: missing evidence degrades to not_evaluable / None
"""

import logging
from collections import Counter
from dataclasses import dataclass

from trialpico.classifiers.comparator import arm_has_add_on, classify_arm
from trialpico.constants import (
    COMPARATOR_PRIORITY,
    PREDOMINANCE_CANDIDATES,
    THRESHOLD_PREDOMINANT,
    THRESHOLD_RELEVANT,
)
from trialpico.models.analysis import ComparatorAnalysis, ComparatorSummaryStats
from trialpico.models.categories import (
    AddOnPrevalence,
    ComparatorType,
    PhaseConsistency,
    PredominantComparator,
)
from trialpico.models.trial import Trial
from trialpico.narrative.notes import comparator_note

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialComparatorProfile:
    """Comparator facts for a single trial."""

    nct_id: str
    phase: str
    control_types: tuple[ComparatorType, ...]
    has_add_on: bool

    @property
    def representative(self) -> ComparatorType | None:
        """Single comparator type standing for the trial, None without control arms."""
        for comparator_type in COMPARATOR_PRIORITY:
            if comparator_type in self.control_types:
                return comparator_type
        return None

    @property
    def has_active_comparator(self) -> bool:
        return ComparatorType.ACTIVE_COMPARATOR in self.control_types


def profile_trial(trial: Trial) -> TrialComparatorProfile:
    """Classify the control-like arms of one trial and flag add-on designs."""
    control_types = tuple(classify_arm(arm) for arm in trial.control_arms())
    has_add_on = any(arm_has_add_on(arm) for arm in trial.arms)

    return TrialComparatorProfile(
        nct_id=trial.nct_id,
        phase=trial.phase_bucket(),
        control_types=control_types,
        has_add_on=has_add_on,
    )


def classify_add_on_prevalence(add_on_trials: int, total_trials: int) -> AddOnPrevalence:
    """Bucket the fraction of trials with an add-on design.

    0 → not_present, below 20% → minority, 20-50% → relevant, above 50% → predominant.
    """
    if total_trials <= 0:
        return AddOnPrevalence.NOT_EVALUABLE

    proportion = add_on_trials / total_trials
    if proportion == 0:
        return AddOnPrevalence.NOT_PRESENT
    if proportion < THRESHOLD_RELEVANT:
        return AddOnPrevalence.MINORITY
    if proportion <= THRESHOLD_PREDOMINANT:
        return AddOnPrevalence.RELEVANT
    return AddOnPrevalence.PREDOMINANT


def _predominant_comparator(counts: Counter) -> PredominantComparator:
    valid_total = sum(
        count for comparator_type, count in counts.items()
        if comparator_type != ComparatorType.UNKNOWN
    )
    if valid_total == 0:
        return PredominantComparator.NOT_EVALUABLE

    leader = max(PREDOMINANCE_CANDIDATES, key=lambda t: counts.get(t, 0))
    proportion = counts.get(leader, 0) / valid_total

    if proportion > THRESHOLD_PREDOMINANT:
        return PredominantComparator(leader.value)
    return PredominantComparator.MIXED


def _phase_consistency(profiles: list[TrialComparatorProfile]) -> PhaseConsistency:
    by_phase: dict[str, list[ComparatorType]] = {}
    for profile in profiles:
        representative = profile.representative
        if representative is None:
            continue
        by_phase.setdefault(profile.phase, []).append(representative)

    if not by_phase:
        return PhaseConsistency.NOT_EVALUABLE
    if len(by_phase) == 1:
        return PhaseConsistency.CONSISTENT

    # Modal type per phase; ties go to the type seen first
    modal_types = {Counter(types).most_common(1)[0][0] for types in by_phase.values()}
    if len(modal_types) == 1:
        return PhaseConsistency.CONSISTENT
    return PhaseConsistency.CHANGES


def analyze_comparators(trials: list[Trial]) -> ComparatorAnalysis:
    """Aggregate comparator structure across trials.

    Args:
        trials: Trials to analyze (may be empty)

    Returns:
        ComparatorAnalysis with predominance, active comparator, add-on and
        phase consistency fields plus a structural note
    """
    if not trials:
        return ComparatorAnalysis()

    profiles = [profile_trial(trial) for trial in trials]

    counts: Counter = Counter()
    for profile in profiles:
        representative = profile.representative
        if representative is not None:
            counts[representative] += 1
            logger.debug(f"{profile.nct_id or '<no id>'}: comparator {representative.value}")

    predominant = _predominant_comparator(counts)
    has_active = any(profile.has_active_comparator for profile in profiles)
    add_on = classify_add_on_prevalence(
        sum(1 for profile in profiles if profile.has_add_on), len(trials)
    )
    phase_consistency = _phase_consistency(profiles)

    return ComparatorAnalysis(
        predominant_comparator=predominant,
        has_direct_active_comparator=has_active,
        add_on_prevalence=add_on,
        phase_consistency=phase_consistency,
        structural_note=comparator_note(predominant, has_active, add_on),
    )


def summarize_comparators(trials: list[Trial]) -> ComparatorSummaryStats:
    """Descriptive comparator counts per arm and per phase.

    Unlike analyze_comparators, every control-like arm is counted, so a trial
    with a placebo and an active comparator arm contributes to both types.
    """
    counts_by_type: Counter = Counter()
    counts_by_phase: dict[str, Counter] = {}
    multiple_in_single_trial = False
    add_on_trials = 0

    for trial in trials:
        profile = profile_trial(trial)
        phase_counts = counts_by_phase.setdefault(profile.phase, Counter())

        for comparator_type in profile.control_types:
            counts_by_type[comparator_type.value] += 1
            phase_counts[comparator_type.value] += 1

        classified = {t for t in profile.control_types if t != ComparatorType.UNKNOWN}
        if len(classified) > 1:
            multiple_in_single_trial = True
        if profile.has_add_on:
            add_on_trials += 1

    classified_types = [t for t in counts_by_type if t != ComparatorType.UNKNOWN.value]

    return ComparatorSummaryStats(
        total_trials=len(trials),
        counts_by_control_type=dict(counts_by_type),
        counts_by_phase={phase: dict(c) for phase, c in counts_by_phase.items()},
        has_active_comparator=counts_by_type[ComparatorType.ACTIVE_COMPARATOR.value] > 0,
        has_heterogeneity=len(classified_types) > 1,
        has_add_on=add_on_trials > 0,
        add_on_prevalence=classify_add_on_prevalence(add_on_trials, len(trials)),
        has_multiple_comparators_in_single_trial=multiple_in_single_trial,
        phases_present=sorted(counts_by_phase),
    )
