"""Thresholds and category groupings shared by the aggregators."""

from trialpico.models.categories import ComparatorType, DominantEndpoint, EndpointType

# Proportion thresholds
THRESHOLD_PREDOMINANT = 0.50  # strictly greater than
THRESHOLD_RELEVANT = 0.20
THRESHOLD_CONSISTENCY_HIGH = 0.75
THRESHOLD_CONSISTENCY_MODERATE = 0.40

# A trial with several control arms is attributed to the first type present
COMPARATOR_PRIORITY: tuple[ComparatorType, ...] = (
    ComparatorType.ACTIVE_COMPARATOR,
    ComparatorType.STANDARD_OF_CARE,
    ComparatorType.PLACEBO,
    ComparatorType.ADD_ON,
    ComparatorType.NO_INTERVENTION,
    ComparatorType.UNKNOWN,
)

# Only these compete for predominance; no_intervention still counts in the denominator
PREDOMINANCE_CANDIDATES: tuple[ComparatorType, ...] = (
    ComparatorType.PLACEBO,
    ComparatorType.STANDARD_OF_CARE,
    ComparatorType.ACTIVE_COMPARATOR,
    ComparatorType.ADD_ON,
)

HARD_CLINICAL_ENDPOINTS: frozenset[EndpointType] = frozenset({EndpointType.OS})

SURROGATE_ENDPOINTS: frozenset[EndpointType] = frozenset({
    EndpointType.PFS,
    EndpointType.DFS,
    EndpointType.EFS,
    EndpointType.RFS,
    EndpointType.TTP,
    EndpointType.TTF,
    EndpointType.ORR,
    EndpointType.CR,
    EndpointType.PCR,
    EndpointType.CBR,
    EndpointType.DCR,
    EndpointType.DOR,
    EndpointType.MRD,
})

# Super-categories used for primary endpoint dominance, in tie-break order
ENDPOINT_GROUPS: tuple[tuple[DominantEndpoint, frozenset[EndpointType]], ...] = (
    (DominantEndpoint.OS, frozenset({EndpointType.OS})),
    (DominantEndpoint.PFS, frozenset({
        EndpointType.PFS, EndpointType.DFS, EndpointType.EFS,
        EndpointType.RFS, EndpointType.TTP, EndpointType.TTF,
    })),
    (DominantEndpoint.ORR, frozenset({
        EndpointType.ORR, EndpointType.CR, EndpointType.PCR, EndpointType.CBR,
        EndpointType.DCR, EndpointType.DOR, EndpointType.MRD,
    })),
    (DominantEndpoint.PRO, frozenset({EndpointType.QOL_PRO})),
    (DominantEndpoint.SAFETY, frozenset({EndpointType.SAFETY})),
    (DominantEndpoint.OTHER_SURROGATE, frozenset({
        EndpointType.BIOMARKER, EndpointType.PK_PD,
        EndpointType.RESOURCE_USE, EndpointType.OTHER,
    })),
)
