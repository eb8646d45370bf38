"""Deterministic structural notes and presentation labels."""

from trialpico.narrative.notes import comparator_note, endpoint_note, pico_note

__all__ = ["comparator_note", "endpoint_note", "pico_note"]
