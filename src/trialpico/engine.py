"""PICO analysis engine.

ARCHITECTURE:
    Trials → ComparatorAggregator + EndpointAggregator → structural notes → PicoAnalysis

Orchestrates the deterministic classifiers and aggregators for one trial or a
trial set.

Key Design:
- Synchronous and pure: no I/O, no shared mutable state, safe to call concurrently
- Total: never raises; missing evidence degrades to not_evaluable / None / Other
- totalTrials always equals the number of input trials
- No memoization here; callers that repeat analyses own any cache
"""

import logging

from trialpico.aggregation.comparators import analyze_comparators, summarize_comparators
from trialpico.aggregation.endpoints import analyze_endpoints
from trialpico.models.analysis import ComparatorSummaryStats, PicoAnalysis
from trialpico.models.trial import Trial

logger = logging.getLogger(__name__)


class PicoAnalysisEngine:
    """
    Engine for PICO structural reading of clinical trials.

    Holds no state between calls; one instance can serve any number of callers.
    """

    def analyze(self, trials: list[Trial]) -> PicoAnalysis:
        """Analyze a set of trials.

        Runs comparator and endpoint aggregation over the same trial list.
        """
        trials = list(trials or [])

        analysis = PicoAnalysis(
            comparator=analyze_comparators(trials),
            endpoint=analyze_endpoints(trials),
            total_trials=len(trials),
        )

        logger.info(
            f"PICO analysis of {analysis.total_trials} trial(s): "
            f"comparator={analysis.comparator.predominant_comparator.value}, "
            f"endpoint={analysis.endpoint.dominant_primary_endpoint.value}"
        )
        return analysis

    def analyze_single(self, trial: Trial) -> PicoAnalysis:
        """Analyze one trial; identical to analyze([trial])."""
        return self.analyze([trial])

    def summarize_comparators(self, trials: list[Trial]) -> ComparatorSummaryStats:
        """Per-arm comparator counts backing the comparator analysis."""
        return summarize_comparators(list(trials or []))


_default_engine = PicoAnalysisEngine()


def analyze_pico(trials: list[Trial]) -> PicoAnalysis:
    """Analyze a set of trials with the shared engine."""
    return _default_engine.analyze(trials)


def analyze_single_trial_pico(trial: Trial) -> PicoAnalysis:
    """Analyze a single trial with the shared engine."""
    return _default_engine.analyze_single(trial)
