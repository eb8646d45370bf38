"""Closed category sets for comparator and endpoint classification.

Every classifier and aggregator output belongs to one of these enums. The
string values are the serialized names consumed by presentation and export
layers, so they must not change.
"""

from enum import Enum


class ComparatorType(str, Enum):
    """Control role of a single arm."""

    PLACEBO = "placebo"
    STANDARD_OF_CARE = "standard_of_care"
    ACTIVE_COMPARATOR = "active_comparator"
    ADD_ON = "add_on"
    NO_INTERVENTION = "no_intervention"
    UNKNOWN = "unknown"


class PredominantComparator(str, Enum):
    """Comparator pattern dominating a set of trials."""

    PLACEBO = "placebo"
    STANDARD_OF_CARE = "standard_of_care"
    ACTIVE_COMPARATOR = "active_comparator"
    ADD_ON = "add_on"
    MIXED = "mixed"
    NOT_EVALUABLE = "not_evaluable"


class AddOnPrevalence(str, Enum):
    """Share of trials using an add-on design.

    not_present: no trial
    minority: below 20%
    relevant: 20% to 50% inclusive
    predominant: above 50%
    """

    NOT_PRESENT = "not_present"
    MINORITY = "minority"
    RELEVANT = "relevant"
    PREDOMINANT = "predominant"
    NOT_EVALUABLE = "not_evaluable"


class PhaseConsistency(str, Enum):
    CONSISTENT = "consistent"
    CHANGES = "changes"
    NOT_EVALUABLE = "not_evaluable"


class EndpointType(str, Enum):
    """Endpoint taxonomy for a single outcome measure."""

    OS = "OS"
    PFS = "PFS"
    DFS = "DFS"
    EFS = "EFS"
    RFS = "RFS"
    TTP = "TTP"
    TTF = "TTF"
    ORR = "ORR"
    CR = "CR"
    PCR = "pCR"
    CBR = "CBR"
    DCR = "DCR"
    DOR = "DOR"
    MRD = "MRD"
    QOL_PRO = "QoL/PRO"
    SAFETY = "Safety"
    BIOMARKER = "Biomarker"
    PK_PD = "PK/PD"
    RESOURCE_USE = "Resource Use"
    OTHER = "Other"


class DominantEndpoint(str, Enum):
    """Primary endpoint super-category dominating a set of trials."""

    OS = "OS"
    PFS = "PFS"
    ORR = "ORR"
    PRO = "PRO"
    SAFETY = "safety"
    OTHER_SURROGATE = "other_surrogate"
    MIXED = "mixed"
    NOT_EVALUABLE = "not_evaluable"


class SurrogateUsage(str, Enum):
    NO = "no"
    SECONDARY = "secondary"
    PRIMARY_PREDOMINANT = "primary_predominant"
    NOT_EVALUABLE = "not_evaluable"


class ProsPresence(str, Enum):
    NOT_PRESENT = "not_present"
    SECONDARY = "secondary"
    RELEVANT = "relevant"
    NOT_EVALUABLE = "not_evaluable"


class EndpointConsistency(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    NOT_EVALUABLE = "not_evaluable"
