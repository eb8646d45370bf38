"""Parsers turning registry payloads into trial models."""

from trialpico.ingest.clinicaltrials import TrialPayloadError, parse_studies, parse_study

__all__ = ["TrialPayloadError", "parse_studies", "parse_study"]
