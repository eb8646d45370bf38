"""Human-readable labels for every analysis category."""

from trialpico.models.categories import (
    AddOnPrevalence,
    ComparatorType,
    DominantEndpoint,
    EndpointConsistency,
    PhaseConsistency,
    PredominantComparator,
    ProsPresence,
    SurrogateUsage,
)
from trialpico.narrative.notes import ensure_exhaustive

COMPARATOR_LABELS = ensure_exhaustive({
    PredominantComparator.PLACEBO: "Placebo",
    PredominantComparator.STANDARD_OF_CARE: "Standard of care (SOC)",
    PredominantComparator.ACTIVE_COMPARATOR: "Active comparator",
    PredominantComparator.ADD_ON: "Add-on over SOC",
    PredominantComparator.MIXED: "Mixed",
    PredominantComparator.NOT_EVALUABLE: "Not evaluable",
}, PredominantComparator)

CONTROL_TYPE_LABELS = ensure_exhaustive({
    ComparatorType.PLACEBO: "placebo",
    ComparatorType.STANDARD_OF_CARE: "standard of care (SOC)",
    ComparatorType.ACTIVE_COMPARATOR: "active comparator",
    ComparatorType.ADD_ON: "add-on over SOC",
    ComparatorType.NO_INTERVENTION: "no intervention",
    ComparatorType.UNKNOWN: "unclassified",
}, ComparatorType)

ADDON_LABELS = ensure_exhaustive({
    AddOnPrevalence.NOT_PRESENT: "Not present",
    AddOnPrevalence.MINORITY: "Minority",
    AddOnPrevalence.RELEVANT: "Relevant",
    AddOnPrevalence.PREDOMINANT: "Predominant",
    AddOnPrevalence.NOT_EVALUABLE: "Not evaluable",
}, AddOnPrevalence)

# Phase and endpoint consistency share one table; both enums use "not_evaluable"
CONSISTENCY_LABELS = {
    **ensure_exhaustive({
        PhaseConsistency.CONSISTENT: "Consistent across phases",
        PhaseConsistency.CHANGES: "Changes across phases",
        PhaseConsistency.NOT_EVALUABLE: "Not evaluable",
    }, PhaseConsistency),
    **ensure_exhaustive({
        EndpointConsistency.HIGH: "High",
        EndpointConsistency.MODERATE: "Moderate",
        EndpointConsistency.LOW: "Low",
        EndpointConsistency.NOT_EVALUABLE: "Not evaluable",
    }, EndpointConsistency),
}

ENDPOINT_LABELS = ensure_exhaustive({
    DominantEndpoint.OS: "Overall Survival (OS)",
    DominantEndpoint.PFS: "Progression-Free Survival (PFS)",
    DominantEndpoint.ORR: "Objective Response Rate (ORR)",
    DominantEndpoint.PRO: "PRO (quality of life)",
    DominantEndpoint.SAFETY: "Safety",
    DominantEndpoint.OTHER_SURROGATE: "Other surrogate",
    DominantEndpoint.MIXED: "Mixed",
    DominantEndpoint.NOT_EVALUABLE: "Not evaluable",
}, DominantEndpoint)

SURROGATE_LABELS = ensure_exhaustive({
    SurrogateUsage.NO: "No",
    SurrogateUsage.SECONDARY: "As secondary endpoints",
    SurrogateUsage.PRIMARY_PREDOMINANT: "As predominant primary endpoints",
    SurrogateUsage.NOT_EVALUABLE: "Not evaluable",
}, SurrogateUsage)

PRO_LABELS = ensure_exhaustive({
    ProsPresence.NOT_PRESENT: "Not present",
    ProsPresence.SECONDARY: "Secondary",
    ProsPresence.RELEVANT: "Relevant",
    ProsPresence.NOT_EVALUABLE: "Not evaluable",
}, ProsPresence)


def yes_no_label(value: bool | None) -> str:
    if value is None:
        return "Not evaluable"
    return "Yes" if value else "No"
