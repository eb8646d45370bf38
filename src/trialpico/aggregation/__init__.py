"""Cross-trial aggregation of per-item classifications."""

from trialpico.aggregation.comparators import analyze_comparators, summarize_comparators
from trialpico.aggregation.endpoints import analyze_endpoints

__all__ = ["analyze_comparators", "analyze_endpoints", "summarize_comparators"]
