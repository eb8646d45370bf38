"""ClinicalTrials.gov API v2 payload parser.

ARCHITECTURE:
    Study JSON (already fetched by the caller) → Trial (arms + classified outcomes)

Converts registry study documents into the Trial records consumed by the
analysis engine. Fetching, paging, caching and rate limiting stay with the
caller; this module only reads dictionaries.

Key Design:
- Arm control role and control-type hint derived from the arm type, then
  from label/description text
- Outcome classification pre-computed with the same endpoint rule table
- Studies that cannot be parsed are skipped with a warning, not raised
"""

import logging
from typing import Any

from trialpico.classifiers.endpoint import classify_endpoint
from trialpico.models.trial import Arm, Outcome, Trial

logger = logging.getLogger(__name__)

_CONTROL_ARM_MARKERS = (
    "comparator",
    "placebo",
    "sham",
    "no_intervention",
    "no intervention",
    "control",
)

_SOC_TEXT_MARKERS = (
    "standard of care",
    "best supportive care",
    "best available therapy",
    "usual care",
    "routine care",
    "investigator's choice",
    "physician's choice",
    "standard treatment",
    "standard therapy",
    "current standard",
)


class TrialPayloadError(ValueError):
    """Exception raised for documents that hold no trials or studies."""
    pass


def _control_type_hint(arm_type: str, text: str) -> str | None:
    """Derive the registry-style control-type label for an arm."""
    if "placebo" in arm_type:
        return "Placebo"
    if "sham" in arm_type:
        return "Sham"
    if "no intervention" in arm_type or "no_intervention" in arm_type:
        return "No Intervention"
    if "active_comparator" in arm_type or "active comparator" in arm_type:
        return "Active Comparator"
    if "experimental" in arm_type:
        return "Experimental"

    # Fall back to label and description hints
    if "placebo" in text:
        return "Placebo"
    if any(marker in text for marker in _SOC_TEXT_MARKERS) or "(soc)" in text or " soc " in f" {text} ":
        return "Standard of Care"
    if "active comparator" in text or "active control" in text:
        return "Active Comparator"
    return None


def parse_arm(arm: dict[str, Any]) -> Arm:
    """Parse one armGroups entry."""
    label = arm.get("label") or ""
    arm_type = arm.get("type") or ""
    description = arm.get("description") or ""
    type_lower = arm_type.lower()
    text = f"{description} {label}".lower()

    return Arm(
        label=label,
        type=arm_type,
        description=description,
        interventions=list(arm.get("interventionNames") or []),
        is_control=any(marker in type_lower for marker in _CONTROL_ARM_MARKERS),
        control_type=_control_type_hint(type_lower, text),
    )


def parse_outcome(outcome: dict[str, Any]) -> Outcome:
    """Parse one outcome entry and pre-compute its endpoint type."""
    measure = outcome.get("measure") or ""
    return Outcome(
        measure=measure,
        time_frame=outcome.get("timeFrame") or "",
        description=outcome.get("description") or "",
        classification=classify_endpoint(measure).value,
    )


def parse_study(study: dict[str, Any]) -> Trial | None:
    """Parse a study from the registry response.

    Args:
        study: Raw study data (with a 'protocolSection')

    Returns:
        Trial object or None if parsing fails
    """
    try:
        protocol = study.get("protocolSection", {})

        # Identification
        id_module = protocol.get("identificationModule", {})
        nct_id = id_module.get("nctId", "")
        title = id_module.get("briefTitle", "") or id_module.get("officialTitle", "")

        # Design - phases
        design_module = protocol.get("designModule", {})
        phases = design_module.get("phases") or []
        phase = ", ".join(phases) if phases else "N/A"

        # Arms
        arms_module = protocol.get("armsInterventionsModule", {})
        arms = [parse_arm(arm) for arm in arms_module.get("armGroups") or []]

        # Outcomes
        outcomes_module = protocol.get("outcomesModule", {})
        primary = [parse_outcome(o) for o in outcomes_module.get("primaryOutcomes") or []]
        secondary = [parse_outcome(o) for o in outcomes_module.get("secondaryOutcomes") or []]

        return Trial(
            nct_id=nct_id,
            brief_title=title,
            phase=phase,
            arms=arms,
            primary_outcomes=primary,
            secondary_outcomes=secondary,
        )
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Skipping unparseable study: {e}")
        return None


def parse_studies(payload: Any) -> list[Trial]:
    """Parse a registry document into trials.

    Accepts a search response ({"studies": [...]}), a single study, or a
    list of studies.

    Raises:
        TrialPayloadError: If the document holds no recognizable study
    """
    if isinstance(payload, dict) and "studies" in payload:
        studies = payload["studies"] or []
    elif isinstance(payload, dict) and "protocolSection" in payload:
        studies = [payload]
    elif isinstance(payload, list):
        studies = payload
    else:
        raise TrialPayloadError("Expected a study, a list of studies, or a {'studies': [...]} document")

    trials = []
    for study in studies:
        if not isinstance(study, dict):
            logger.warning(f"Skipping non-object study entry: {type(study).__name__}")
            continue
        trial = parse_study(study)
        if trial is not None:
            trials.append(trial)

    return trials


def is_registry_study(document: Any) -> bool:
    """Check if a dictionary looks like a registry study document."""
    return isinstance(document, dict) and "protocolSection" in document
