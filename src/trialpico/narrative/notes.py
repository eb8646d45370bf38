"""Template-based structural notes.

Each note is one opening sentence keyed by the dominant category, followed by
optional clauses for add-on designs, active comparators, surrogate use and
PROs. No randomness and no external text generation: the same inputs always
produce the same text.
"""

from enum import Enum

from trialpico.models.analysis import NOT_EVALUABLE_NOTE, PicoAnalysis
from trialpico.models.categories import (
    AddOnPrevalence,
    DominantEndpoint,
    PredominantComparator,
    ProsPresence,
    SurrogateUsage,
)


def ensure_exhaustive(mapping: dict, enum_cls: type[Enum]) -> dict:
    """Fail at import time if a template table misses a category."""
    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise KeyError(f"{enum_cls.__name__} has no template for: {', '.join(missing)}")
    return mapping


COMPARATOR_OPENINGS: dict[PredominantComparator, str | None] = ensure_exhaustive({
    PredominantComparator.PLACEBO: "The evidence relies mostly on placebo-controlled comparisons",
    PredominantComparator.STANDARD_OF_CARE: "The evidence is based mainly on comparisons against standard of care",
    PredominantComparator.ACTIVE_COMPARATOR: "The trials include direct active comparators",
    PredominantComparator.ADD_ON: "Add-on designs on top of background therapy predominate",
    PredominantComparator.MIXED: "The evidence shows heterogeneity in the comparators used",
    PredominantComparator.NOT_EVALUABLE: None,
}, PredominantComparator)

ADD_ON_CLAUSES: dict[AddOnPrevalence, str] = ensure_exhaustive({
    AddOnPrevalence.NOT_PRESENT: "",
    AddOnPrevalence.MINORITY: ", with limited presence of add-on designs",
    AddOnPrevalence.RELEVANT: ", with limited presence of add-on designs",
    AddOnPrevalence.PREDOMINANT: ", mostly in add-on designs",
    AddOnPrevalence.NOT_EVALUABLE: "",
}, AddOnPrevalence)

ENDPOINT_OPENINGS: dict[DominantEndpoint, str | None] = ensure_exhaustive({
    DominantEndpoint.OS: "The trials use overall survival as the primary endpoint",
    DominantEndpoint.PFS: "The trials use progression-free survival as the primary endpoint",
    DominantEndpoint.ORR: "Objective response rate predominates as the primary endpoint",
    DominantEndpoint.PRO: "Patient-reported outcomes are the main primary endpoint",
    DominantEndpoint.SAFETY: "The trials focus on safety endpoints as the primary endpoint",
    DominantEndpoint.OTHER_SURROGATE: "The trials mostly use other surrogate endpoints as the primary endpoint",
    DominantEndpoint.MIXED: "There is heterogeneity in the primary endpoints used",
    DominantEndpoint.NOT_EVALUABLE: None,
}, DominantEndpoint)


def comparator_note(
    predominant: PredominantComparator,
    has_active: bool | None,
    add_on: AddOnPrevalence,
) -> str:
    """Structural note for the comparator side of a trial set."""
    opening = COMPARATOR_OPENINGS[predominant]
    if opening is None:
        return NOT_EVALUABLE_NOTE

    parts = [opening, ADD_ON_CLAUSES[add_on]]

    if has_active and predominant != PredominantComparator.ACTIVE_COMPARATOR:
        parts.append(". Direct active comparisons exist in part of the evidence")

    return "".join(parts) + "."


def endpoint_note(
    dominant: DominantEndpoint,
    has_hard: bool | None,
    surrogate: SurrogateUsage,
    pros: ProsPresence,
) -> str:
    """Structural note for the endpoint side of a trial set."""
    opening = ENDPOINT_OPENINGS[dominant]
    if opening is None:
        return NOT_EVALUABLE_NOTE

    parts = [opening]

    if surrogate == SurrogateUsage.PRIMARY_PREDOMINANT and dominant != DominantEndpoint.OS:
        parts.append(", with predominance of surrogate endpoints")

    if has_hard and dominant != DominantEndpoint.OS:
        parts.append(". Overall survival is present in part of the evidence")

    if pros == ProsPresence.RELEVANT and dominant != DominantEndpoint.PRO:
        parts.append(". PROs have a relevant presence")
    elif pros == ProsPresence.SECONDARY:
        parts.append(". PROs appear as secondary endpoints")

    return "".join(parts) + "."


def pico_note(analysis: PicoAnalysis) -> str:
    """One paragraph combining the comparator and endpoint notes."""
    comparator = analysis.comparator.structural_note
    endpoint = analysis.endpoint.structural_note

    if comparator == endpoint == NOT_EVALUABLE_NOTE:
        return NOT_EVALUABLE_NOTE

    trial_word = "trial" if analysis.total_trials == 1 else "trials"
    return f"Across {analysis.total_trials} {trial_word}: {comparator} {endpoint}"
