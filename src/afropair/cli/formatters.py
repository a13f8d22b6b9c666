"""CLI output formatting utilities."""

from rich.console import Console
from rich.table import Table

from afropair.config import StatusConfig
from afropair.engines.base import LoadReport
from afropair.models import ScoredDecision
from afropair.pipeline import BatchResult
from afropair.records import determine_status

console = Console()


def format_decisions_table(
    scored: list[ScoredDecision], thresholds: StatusConfig | None = None
) -> Table:
    """Format scored decisions as a Rich table, graded with ``thresholds``."""
    table = Table(title=f"Translations (Segments: {len(scored)})")
    table.add_column("Segment", style="dim")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("Origin", style="blue")
    table.add_column("Confidence", style="yellow")
    table.add_column("Status")

    for result in scored:
        table.add_row(
            result.seg_id,
            result.source_text,
            result.chosen_target,
            result.decision.chosen.origin.value,
            f"{result.composite_confidence:.2f}",
            determine_status(result.composite_confidence, thresholds),
        )

    return table


def format_candidates_table(result: ScoredDecision) -> Table:
    """Format every candidate considered for one segment."""
    table = Table(title=f"{result.seg_id}: {result.explanation}")
    table.add_column("Origin", style="blue")
    table.add_column("Target", style="green")
    table.add_column("Confidence", style="yellow")

    for candidate in result.candidates:
        table.add_row(
            candidate.origin.value,
            candidate.target,
            f"{candidate.confidence:.2f}",
        )

    return table


def format_batch_summary(batch: BatchResult) -> Table:
    table = Table(title="Batch Summary")
    table.add_column("Sentence", style="cyan")
    table.add_column("Translation", style="green")
    table.add_column("Confidence", style="yellow")

    for result in batch.results:
        source = " ".join(s.source_text for s in result.scored) or "-"
        translation = result.translation if result.success else f"[red]{result.error}[/red]"
        table.add_row(source, translation, f"{result.confidence:.2f}")

    table.caption = (
        f"{batch.successful}/{batch.total} successful "
        f"({batch.success_rate * 100:.1f}%)"
    )
    return table


def format_load_reports(reports: dict[str, LoadReport]) -> Table:
    table = Table(title="Tables")
    table.add_column("Table", style="cyan")
    table.add_column("Path")
    table.add_column("Entries", style="green")
    table.add_column("Skipped", style="yellow")
    table.add_column("State")

    for name, report in reports.items():
        state = "[red]missing[/red]" if report.missing else "ok"
        table.add_row(
            name,
            report.path or "-",
            str(report.entries),
            str(report.skipped),
            state,
        )

    return table
