"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table


if TYPE_CHECKING:
    from rich.console import Console

    from healthanalytics.core.models import AnalyticsReport, ReportCheck, ReportResult
    from healthanalytics.reporting.queries import ReportDefinition

TEXT_COLUMNS = ("patient_name", "symptom_name", "city", "diagnosis_name")


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def print_report_result(console: Console, result: ReportResult) -> None:
    """Print a single report as a table."""
    if result.error:
        console.print(
            Panel(f"[red]{result.error}[/red]", title=result.title, border_style="red")
        )
        return
    if not result.rows:
        console.print(f"[bold]{result.title}[/bold]\n  [yellow]⚠[/yellow] No rows")
        return
    table = Table(title=result.title, border_style="blue", title_justify="left")
    for column in result.columns:
        justify = "left" if column in TEXT_COLUMNS else "right"
        table.add_column(column.replace("_", " ").title(), justify=justify)
    for row in result.rows:
        table.add_row(*(_format_value(row[col]) for col in result.columns))
    console.print(table)


def print_checks(console: Console, checks: list[ReportCheck]) -> None:
    """Print SQL verification results."""
    if not checks:
        return
    table = Table(title="SQL Verification", border_style="dim")
    table.add_column("Report")
    table.add_column("Engine", justify="right")
    table.add_column("SQL", justify="right")
    table.add_column("Status")
    for check in checks:
        if check.error:
            status = f"[red]✗ {check.error}[/red]"
        elif check.matched:
            status = "[green]✓ match[/green]"
        else:
            status = "[red]✗ mismatch[/red]"
        table.add_row(check.name.value, str(check.engine_rows), str(check.sql_rows), status)
    console.print()
    console.print(table)


def print_report_summary(console: Console, report: AnalyticsReport) -> None:
    """Print final run summary."""
    console.print()
    table = Table(title="Run Summary", border_style="blue")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for name, count in report.stats.items():
        table.add_row(name.title(), str(count))
    table.add_row("Reports", str(len(report.results)))
    table.add_row("Reports With Errors", str(sum(1 for r in report.results if r.error)))
    if report.checks:
        matched = sum(1 for c in report.checks if c.matched)
        table.add_row("Verified Against SQL", f"{matched}/{len(report.checks)}")
    table.add_row("Processing Time", f"{report.processing_time_seconds:.2f}s")
    console.print(table)


def print_db_stats(console: Console, stats: dict[str, int]) -> None:
    """Print database statistics."""
    table = Table(title="Healthcare Database Statistics", border_style="blue")
    table.add_column("Table", style="bold")
    table.add_column("Rows", justify="right")
    for name, count in stats.items():
        table.add_row(name, str(count))
    console.print()
    console.print(table)


def print_report_list(console: Console, reports: dict[Any, ReportDefinition]) -> None:
    """Print the available reports."""
    table = Table(title="Available Reports", border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Parameters", style="dim")
    for name, definition in reports.items():
        params = ", ".join(f"{p}={default}" for p, default in definition.parameters)
        table.add_row(name.value, definition.title, params)
    console.print(table)
