"""Deterministic PICO structural reading of clinical-trial design data."""

from trialpico.engine import PicoAnalysisEngine, analyze_pico, analyze_single_trial_pico
from trialpico.models import (
    Arm,
    ComparatorAnalysis,
    EndpointAnalysis,
    Outcome,
    PicoAnalysis,
    Trial,
)

__all__ = [
    "PicoAnalysisEngine",
    "analyze_pico",
    "analyze_single_trial_pico",
    "Arm",
    "Outcome",
    "Trial",
    "ComparatorAnalysis",
    "EndpointAnalysis",
    "PicoAnalysis",
]
