"""Outcome measure classification into the endpoint taxonomy."""

import logging

from trialpico.config.endpoint_rules import load_endpoint_rules
from trialpico.models.categories import EndpointType
from trialpico.models.trial import Outcome

logger = logging.getLogger(__name__)


def classify_endpoint(measure: str | None) -> EndpointType:
    """Classify one outcome measure title.

    Rules are evaluated top-down (overall survival, survival families,
    response, time-to-event, MRD, PRO, safety, biomarker, PK/PD, resource
    use) and the first match wins.

    Example:
        classify_endpoint("Progression-Free Survival") -> EndpointType.PFS
    """
    if not measure or not measure.strip():
        return EndpointType.OTHER
    return load_endpoint_rules().classify(measure.lower())


def classify_outcome(outcome: Outcome) -> EndpointType:
    """Classify an outcome from its measure text.

    Any classification supplied at ingestion time is ignored; a disagreement
    is only logged.
    """
    local = classify_endpoint(outcome.measure)
    if outcome.classification and not outcome_classification_agrees(outcome, local):
        logger.debug(
            f"Upstream classification '{outcome.classification}' differs from "
            f"'{local.value}' for measure '{outcome.measure}'"
        )
    return local


def outcome_classification_agrees(outcome: Outcome, local: EndpointType | None = None) -> bool:
    """Check an upstream classification against the local rule table.

    Missing upstream classifications count as agreeing.
    """
    if not outcome.classification:
        return True
    if local is None:
        local = classify_endpoint(outcome.measure)
    return outcome.classification.strip().lower() == local.value.lower()
