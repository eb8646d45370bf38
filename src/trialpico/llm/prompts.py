# trialpico/llm/prompts.py
"""
Prompts for an optional LLM rewrite of the PICO structural reading.
The analysis is computed deterministically - an LLM may only rephrase it.
"""

from trialpico.models.analysis import PicoAnalysis
from trialpico.narrative.labels import (
    ADDON_LABELS,
    COMPARATOR_LABELS,
    CONSISTENCY_LABELS,
    ENDPOINT_LABELS,
    PRO_LABELS,
    SURROGATE_LABELS,
    yes_no_label,
)

NARRATIVE_SYSTEM_PROMPT = """You are a senior health technology assessment (HTA) reviewer writing a PICO summary of a clinical development programme.

The structured reading below has already been computed deterministically. Your role is ONLY to rephrase it:
1. Use EXCLUSIVELY the structured fields provided.
2. Do NOT invent trials, numbers, comparators or endpoints that are not stated.
3. Do NOT judge efficacy, safety or clinical value.
4. If a field is "Not evaluable", say explicitly that it is not available.
5. Keep an objective, descriptive tone without recommendations."""

NARRATIVE_USER_PROMPT = """Write a {length} PICO narrative summary from this structured reading:

{context}
{focus}
Respond with JSON:
{{
  "narrative": "{length} summary restating only the fields above"
}}
"""

BASIC_FOCUS = """The summary must:
- Combine comparators and endpoints in one paragraph
- State the dominant pattern and whether direct evidence exists
"""

ADVANCED_FOCUS = """The summary must cover:
1. Size of the programme (number of trials)
2. Comparator pattern, active comparators and add-on designs
3. Consistency of comparators across phases
4. Dominant primary endpoint, surrogate use and hard endpoints
5. Presence of patient-reported outcomes and endpoint consistency
"""

LENGTHS = {"basic": "6-8 sentence", "advanced": "10-14 sentence"}


def build_analysis_context(
    analysis: PicoAnalysis,
    drug_name: str | None = None,
    indication: str | None = None,
) -> str:
    """Render the structured reading as labelled lines for grounding."""
    comparator = analysis.comparator
    endpoint = analysis.endpoint

    lines = []
    if drug_name:
        lines.append(f"Drug: {drug_name}")
    if indication:
        lines.append(f"Indication: {indication}")
    lines.append(f"Trials analyzed: {analysis.total_trials}")
    lines.append("")

    lines.append("COMPARATORS:")
    lines.append(f"- Predominant comparator: {COMPARATOR_LABELS[comparator.predominant_comparator]}")
    lines.append(f"- Direct active comparator: {yes_no_label(comparator.has_direct_active_comparator)}")
    lines.append(f"- Add-on designs: {ADDON_LABELS[comparator.add_on_prevalence]}")
    lines.append(f"- Consistency across phases: {CONSISTENCY_LABELS[comparator.phase_consistency]}")
    lines.append(f"- Note: {comparator.structural_note}")
    lines.append("")

    lines.append("ENDPOINTS:")
    lines.append(f"- Dominant primary endpoint: {ENDPOINT_LABELS[endpoint.dominant_primary_endpoint]}")
    lines.append(f"- Hard clinical endpoint as primary: {yes_no_label(endpoint.has_hard_clinical_primary)}")
    lines.append(f"- Surrogate use: {SURROGATE_LABELS[endpoint.surrogate_usage]}")
    lines.append(f"- PROs: {PRO_LABELS[endpoint.pros_presence]}")
    lines.append(f"- Endpoint consistency: {CONSISTENCY_LABELS[endpoint.endpoint_consistency]}")
    lines.append(f"- Note: {endpoint.structural_note}")

    return "\n".join(lines)


def create_narrative_prompt(
    analysis: PicoAnalysis,
    mode: str = "basic",
    drug_name: str | None = None,
    indication: str | None = None,
) -> list[dict]:
    """
    Create a prompt asking an LLM to rephrase a pre-computed PICO analysis.

    Args:
        analysis: Deterministic PicoAnalysis to ground the narrative
        mode: "basic" or "advanced"
        drug_name: Optional drug name for context
        indication: Optional indication for context

    Returns:
        Messages list for LLM API call
    """
    if mode not in LENGTHS:
        raise ValueError(f"Unknown narrative mode '{mode}'. Expected one of: {', '.join(LENGTHS)}")

    context = build_analysis_context(analysis, drug_name=drug_name, indication=indication)
    focus = ADVANCED_FOCUS if mode == "advanced" else BASIC_FOCUS

    user_prompt = NARRATIVE_USER_PROMPT.format(
        length=LENGTHS[mode],
        context=context,
        focus=focus,
    )

    return [
        {"role": "system", "content": NARRATIVE_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
