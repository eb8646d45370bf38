"""Rule-based classifiers for arms and outcome measures."""

from trialpico.classifiers.comparator import (
    arm_has_add_on,
    classify_arm,
    classify_comparator,
    detect_add_on_design,
)
from trialpico.classifiers.endpoint import (
    classify_endpoint,
    classify_outcome,
    outcome_classification_agrees,
)

__all__ = [
    "arm_has_add_on",
    "classify_arm",
    "classify_comparator",
    "classify_endpoint",
    "classify_outcome",
    "detect_add_on_design",
    "outcome_classification_agrees",
]
