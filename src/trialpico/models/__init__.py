"""Data models for trialpico."""

from trialpico.models.analysis import (
    ComparatorAnalysis,
    ComparatorSummaryStats,
    EndpointAnalysis,
    PicoAnalysis,
)
from trialpico.models.categories import (
    AddOnPrevalence,
    ComparatorType,
    DominantEndpoint,
    EndpointConsistency,
    EndpointType,
    PhaseConsistency,
    PredominantComparator,
    ProsPresence,
    SurrogateUsage,
)
from trialpico.models.trial import Arm, Outcome, Trial, normalize_phase

__all__ = [
    "Arm",
    "Outcome",
    "Trial",
    "normalize_phase",
    "ComparatorType",
    "PredominantComparator",
    "AddOnPrevalence",
    "PhaseConsistency",
    "EndpointType",
    "DominantEndpoint",
    "SurrogateUsage",
    "ProsPresence",
    "EndpointConsistency",
    "ComparatorAnalysis",
    "EndpointAnalysis",
    "ComparatorSummaryStats",
    "PicoAnalysis",
]
