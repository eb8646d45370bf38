"""Aggregate analysis models."""

import textwrap

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from rich.console import Console
from rich.panel import Panel

from trialpico.models.categories import (
    AddOnPrevalence,
    ComparatorType,
    DominantEndpoint,
    EndpointConsistency,
    PhaseConsistency,
    PredominantComparator,
    ProsPresence,
    SurrogateUsage,
)

NOT_EVALUABLE_NOTE = "Not evaluable with the available data."


class AnalysisRecord(BaseModel):
    """Base for output records: serialized with camelCase names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ComparatorAnalysis(AnalysisRecord):
    """Comparator structure across a set of trials."""

    predominant_comparator: PredominantComparator = Field(
        PredominantComparator.NOT_EVALUABLE, description="Comparator holding more than half of trials"
    )
    has_direct_active_comparator: bool | None = Field(
        None, description="True if any trial has an active comparator arm; None without trials"
    )
    add_on_prevalence: AddOnPrevalence = AddOnPrevalence.NOT_EVALUABLE
    phase_consistency: PhaseConsistency = PhaseConsistency.NOT_EVALUABLE
    structural_note: str = NOT_EVALUABLE_NOTE


class EndpointAnalysis(AnalysisRecord):
    """Endpoint structure across a set of trials."""

    dominant_primary_endpoint: DominantEndpoint = Field(
        DominantEndpoint.NOT_EVALUABLE, description="Primary endpoint family above half of primaries"
    )
    has_hard_clinical_primary: bool | None = Field(
        None, description="True if any trial has overall survival as primary; None without trials"
    )
    surrogate_usage: SurrogateUsage = SurrogateUsage.NOT_EVALUABLE
    pros_presence: ProsPresence = ProsPresence.NOT_EVALUABLE
    endpoint_consistency: EndpointConsistency = EndpointConsistency.NOT_EVALUABLE
    structural_note: str = NOT_EVALUABLE_NOTE


class ComparatorSummaryStats(AnalysisRecord):
    """Descriptive comparator counts behind the comparator analysis."""

    total_trials: int = Field(0, ge=0)
    counts_by_control_type: dict[str, int] = Field(
        default_factory=dict, description="Control-like arms per comparator type"
    )
    counts_by_phase: dict[str, dict[str, int]] = Field(
        default_factory=dict, description="Control-like arms per phase bucket and comparator type"
    )
    has_active_comparator: bool = False
    has_heterogeneity: bool = Field(False, description="More than one classified control type present")
    has_add_on: bool = False
    add_on_prevalence: AddOnPrevalence = AddOnPrevalence.NOT_EVALUABLE
    has_multiple_comparators_in_single_trial: bool = False
    phases_present: list[str] = Field(default_factory=list)

    def to_report(self) -> str:
        """Rich panel listing control-arm counts overall and per phase."""
        from trialpico.narrative.labels import ADDON_LABELS, CONTROL_TYPE_LABELS, yes_no_label

        def describe(counts: dict[str, int]) -> str:
            if not counts:
                return "no control arms"
            return ", ".join(
                f"{CONTROL_TYPE_LABELS[ComparatorType(name)]} ({count})"
                for name, count in sorted(counts.items(), key=lambda item: -item[1])
            )

        content_lines = [
            f"[bold cyan]Trials analyzed:[/bold cyan] {self.total_trials}",
            f"[dim]Control arms:[/dim] {describe(self.counts_by_control_type)}",
            f"[dim]Active comparator:[/dim] {yes_no_label(self.has_active_comparator)}",
            f"[dim]Heterogeneous comparators:[/dim] {yes_no_label(self.has_heterogeneity)}",
            f"[dim]Several comparators in one trial:[/dim] "
            f"{yes_no_label(self.has_multiple_comparators_in_single_trial)}",
            f"[dim]Add-on designs:[/dim] {ADDON_LABELS[self.add_on_prevalence]}",
        ]
        if self.phases_present:
            content_lines.append("")
            content_lines.append("[bold]By phase[/bold]")
            for phase in self.phases_present:
                content_lines.append(f"[dim]{phase}:[/dim] {describe(self.counts_by_phase.get(phase, {}))}")

        return _render_panel("Comparator Summary", content_lines)


class PicoAnalysis(AnalysisRecord):
    """Combined comparator and endpoint reading of a trial set."""

    comparator: ComparatorAnalysis
    endpoint: EndpointAnalysis
    total_trials: int = Field(..., ge=0)

    def to_dict(self) -> dict:
        """JSON-ready dictionary with the serialized field names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_report(self) -> str:
        """Pretty report output with Rich formatting and soft-wrapping."""
        from trialpico.narrative.labels import (
            ADDON_LABELS,
            COMPARATOR_LABELS,
            CONSISTENCY_LABELS,
            ENDPOINT_LABELS,
            PRO_LABELS,
            SURROGATE_LABELS,
            yes_no_label,
        )

        comparator = self.comparator
        endpoint = self.endpoint

        content_lines = [
            f"[bold cyan]Trials analyzed:[/bold cyan] {self.total_trials}",
            "",
            "[bold]Comparator[/bold]",
            f"[dim]Predominant:[/dim] {COMPARATOR_LABELS[comparator.predominant_comparator]}",
            f"[dim]Direct active comparator:[/dim] {yes_no_label(comparator.has_direct_active_comparator)}",
            f"[dim]Add-on designs:[/dim] {ADDON_LABELS[comparator.add_on_prevalence]}",
            f"[dim]Across phases:[/dim] {CONSISTENCY_LABELS[comparator.phase_consistency]}",
            textwrap.fill(comparator.structural_note, width=74),
            "",
            "[bold]Endpoints[/bold]",
            f"[dim]Dominant primary:[/dim] {ENDPOINT_LABELS[endpoint.dominant_primary_endpoint]}",
            f"[dim]Hard clinical primary:[/dim] {yes_no_label(endpoint.has_hard_clinical_primary)}",
            f"[dim]Surrogates:[/dim] {SURROGATE_LABELS[endpoint.surrogate_usage]}",
            f"[dim]PROs:[/dim] {PRO_LABELS[endpoint.pros_presence]}",
            f"[dim]Consistency:[/dim] {CONSISTENCY_LABELS[endpoint.endpoint_consistency]}",
            textwrap.fill(endpoint.structural_note, width=74),
        ]

        return _render_panel("PICO Structural Reading", content_lines)


def _render_panel(title: str, content_lines: list[str]) -> str:
    """Render lines inside a titled rich Panel and return the captured text."""
    console = Console(width=80, force_terminal=True)

    panel = Panel(
        "\n".join(content_lines),
        title=f"[bold white]{title}[/bold white]",
        border_style="blue",
        padding=(1, 2),
    )

    with console.capture() as capture:
        console.print(panel)

    return capture.get()
