"""Rich console output and logging setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from healthanalytics.console.display import (
    print_checks,
    print_db_stats,
    print_report_list,
    print_report_result,
    print_report_summary,
)


if TYPE_CHECKING:
    from healthanalytics.core.models import AnalyticsReport, ReportResult
    from healthanalytics.reporting.queries import ReportDefinition


class ReportConsole:
    """Rich console interface for report runs and results."""

    def __init__(self, verbose: bool = False) -> None:
        self.console = Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, db_path: str) -> None:
        header = Text()
        header.append("healthanalytics", style="bold blue")
        header.append(" - Healthcare Visit Reports\n\n", style="dim")
        header.append("Database: ", style="bold")
        header.append(str(db_path), style="green")
        self.console.print(Panel(header, border_style="blue"))
        self.console.print()

    def print_result(self, result: ReportResult) -> None:
        print_report_result(self.console, result)

    def print_report(self, report: AnalyticsReport) -> None:
        for result in report.results:
            self.print_result(result)
            self.console.print()
        print_checks(self.console, report.checks)
        print_report_summary(self.console, report)

    def print_sql(self, title: str, sql: str, warnings: list[str]) -> None:
        self.console.print(Panel(Syntax(sql, "sql", word_wrap=True), title=title, border_style="blue"))
        for warning in warnings:
            self.console.print(f"  [yellow]⚠[/yellow] {warning}")

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        body = f"[green]✓ {message}[/green]"
        for key, value in (details or {}).items():
            body += f"\n[bold]{key}:[/bold] {value}"
        self.console.print()
        self.console.print(Panel(body, title="[green]Complete[/green]", border_style="green"))

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )

    def print_db_stats(self, stats: dict[str, int]) -> None:
        print_db_stats(self.console, stats)

    def print_report_list(self, reports: dict[Any, ReportDefinition]) -> None:
        print_report_list(self.console, reports)
