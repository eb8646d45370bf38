"""Per-arm comparator classification and add-on design detection.

Both functions are pure: identical text always yields the identical answer.
"""

from trialpico.config.comparator_rules import load_comparator_rules
from trialpico.models.categories import ComparatorType
from trialpico.models.trial import Arm


def classify_comparator(hint: str | None, text: str | None = None) -> ComparatorType:
    """Classify the control role of an arm.

    The hint (explicit control-type label, else the arm type) is matched first
    against the full ordered rule list. When no rule fires, the arm's label and
    description are scanned with the narrower placebo / standard of care /
    active comparator fallback.

    Args:
        hint: Control-type hint (e.g., "Placebo", "ACTIVE_COMPARATOR")
        text: Arm label and description used for the fallback

    Returns:
        ComparatorType, UNKNOWN when nothing matches
    """
    rules = load_comparator_rules()

    if hint:
        category = rules.match_hint(hint.lower())
        if category is not None:
            return category

    if text:
        category = rules.match_text(text.lower())
        if category is not None:
            return category

    return ComparatorType.UNKNOWN


def classify_arm(arm: Arm) -> ComparatorType:
    """Classify an arm from its hint and free text."""
    return classify_comparator(arm.comparator_hint(), arm.free_text())


def detect_add_on_design(text: str | None) -> bool:
    """Check if arm text describes a combination / add-on design.

    Args:
        text: Arm label and description

    Returns:
        True if any add-on phrase (e.g., "in combination", "on top of") is present
    """
    if not text or not text.strip():
        return False
    return load_comparator_rules().has_add_on_phrase(text.lower())


def arm_has_add_on(arm: Arm) -> bool:
    return detect_add_on_design(arm.free_text())
