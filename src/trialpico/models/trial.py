"""Trial design input models.

These records are produced by the ingestion side (registry payload parser or
any caller holding trial data) and are read-only for the analysis core.
Field names accept both snake_case and the registry's camelCase spelling.
JSON nulls in text, flag and list fields read as empty values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNKNOWN_PHASE = "unknown"

_CONTROL_TYPE_MARKERS = ("comparator", "control", "placebo")


def normalize_phase(phase: str | None) -> str:
    """Map free-text phase to a coarse bucket.

    Examples:
        "PHASE2, PHASE3" -> "Phase 2/3"
        "Early Phase 1" -> "Phase 1"
        "N/A" -> "unknown"
    """
    if not phase:
        return UNKNOWN_PHASE

    lower = phase.lower()

    # Combined phases first so "1/2" does not collapse into "Phase 1"
    if "1" in lower and "2" in lower:
        return "Phase 1/2"
    if "2" in lower and "3" in lower:
        return "Phase 2/3"
    if "1" in lower:
        return "Phase 1"
    if "2" in lower:
        return "Phase 2"
    if "3" in lower:
        return "Phase 3"
    if "4" in lower:
        return "Phase 4"

    return UNKNOWN_PHASE


class TrialRecord(BaseModel):
    """Base for input records: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def _empty_if_none(value: Any, empty: Any) -> Any:
    return empty if value is None else value


class Arm(TrialRecord):
    """One arm group of a trial."""

    label: str = Field("", description="Arm label as registered")
    type: str = Field("", description="Arm type (e.g., EXPERIMENTAL, PLACEBO_COMPARATOR)")
    description: str = Field("", description="Free-text arm description")
    is_control: bool = Field(False, description="True if the registry marks the arm as a control")
    control_type: str | None = Field(None, description="Explicit control-type hint, if any")
    interventions: list[str] = Field(default_factory=list, description="Intervention names")

    @field_validator("label", "type", "description", mode="before")
    @classmethod
    def null_text_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v, "")

    @field_validator("is_control", mode="before")
    @classmethod
    def null_flag_to_false(cls, v: Any) -> Any:
        return _empty_if_none(v, False)

    @field_validator("interventions", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v, [])

    def is_control_like(self) -> bool:
        """Check if the arm plays a control role in the trial."""
        if self.is_control:
            return True
        type_lower = (self.type or "").lower()
        return any(marker in type_lower for marker in _CONTROL_TYPE_MARKERS)

    def comparator_hint(self) -> str:
        """Explicit control-type label if present, else the arm type."""
        return self.control_type or self.type or ""

    def free_text(self) -> str:
        """Label and description joined, lower-cased."""
        return f"{self.label or ''} {self.description or ''}".lower()


class Outcome(TrialRecord):
    """A primary or secondary outcome measure."""

    measure: str = Field("", description="Outcome measure title")
    time_frame: str = Field("", description="Assessment time frame")
    description: str | None = Field(None, description="Outcome description")
    classification: str | None = Field(
        None, description="Endpoint type assigned at ingestion time, if any"
    )

    @field_validator("measure", "time_frame", mode="before")
    @classmethod
    def null_text_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v, "")


class Trial(TrialRecord):
    """Design data for one clinical trial."""

    nct_id: str = Field("", description="Registry identifier (e.g., NCT01234567)")
    brief_title: str = Field("", description="Brief trial title")
    phase: str | None = Field(None, description="Free-text phase (e.g., 'Phase 2/3')")
    arms: list[Arm] = Field(default_factory=list)
    primary_outcomes: list[Outcome] = Field(default_factory=list)
    secondary_outcomes: list[Outcome] = Field(default_factory=list)

    @field_validator("nct_id", "brief_title", mode="before")
    @classmethod
    def null_text_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v, "")

    @field_validator("arms", "primary_outcomes", "secondary_outcomes", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v, [])

    def phase_bucket(self) -> str:
        """Normalized phase group used for cross-phase consistency."""
        return normalize_phase(self.phase)

    def control_arms(self) -> list[Arm]:
        """Arms considered control-like."""
        return [arm for arm in self.arms if arm.is_control_like()]
