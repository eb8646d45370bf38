"""Grounding prompts for an optional external narrative model."""

from trialpico.llm.prompts import build_analysis_context, create_narrative_prompt

__all__ = ["build_analysis_context", "create_narrative_prompt"]
