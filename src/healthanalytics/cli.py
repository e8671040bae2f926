"""Command-line interface for healthanalytics."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from healthanalytics.config.settings import Settings
from healthanalytics.console.logger import ReportConsole
from healthanalytics.core.types import ReportName
from healthanalytics.orchestrator.pipeline import ReportPipeline
from healthanalytics.reporting.queries import REPORTS, get_report
from healthanalytics.storage.database import HealthcareDatabase
from healthanalytics.tools.sql import SQLValidator


console = ReportConsole()


def _settings(db_path: str | None) -> Settings:
    settings = Settings()
    if db_path:
        settings.database.path = db_path
    return settings


def _existing_settings(db_path: str | None) -> Settings:
    settings = _settings(db_path)
    if not Path(settings.database.path).exists():
        msg = f"Database {settings.database.path} not found, run 'healthanalytics init-db' first"
        raise FileNotFoundError(msg)
    return settings


def init_db(db_path: str | None = None) -> None:
    """Initialize the database with the seed rows."""
    settings = _settings(db_path)
    db = HealthcareDatabase(settings.database.path)
    loaded = db.load_sample_data()
    stats = db.get_stats()
    message = "Database initialized" if loaded else "Database already populated"
    console.print_success(
        message,
        {"Path": settings.database.path, **{name.title(): count for name, count in stats.items()}},
    )


def show_stats(db_path: str | None = None) -> None:
    """Show database statistics."""
    settings = _existing_settings(db_path)
    console.print_db_stats(HealthcareDatabase(settings.database.path).get_stats())


def run_reports(
    names: list[str] | None = None,
    db_path: str | None = None,
    html_path: str | None = None,
    verify: bool = False,
) -> bool:
    """Run reports and print them.

    Returns:
        False if verification was requested and a report did not match.
    """
    settings = _existing_settings(db_path)
    console.setup_logging(settings.log_level)
    console.print_header(settings.database.path)
    pipeline = ReportPipeline(settings)
    report = pipeline.run(names or None, verify=verify, html_path=html_path)
    console.print_report(report)
    if html_path:
        console.print_success("HTML report generated", {"Output": html_path})
    return report.all_checks_passed


def show_sql(name: str) -> None:
    """Print the formatted reference SQL of a report."""
    report, definition = get_report(name)
    validator = SQLValidator()
    validation = validator.validate(definition.sql)
    console.print_sql(report.value, validator.format_sql(definition.sql), validation["warnings"])


def main() -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="healthanalytics", description="Analytical reports over healthcare visit data"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_cmd = subparsers.add_parser("init-db", help="Create the database and load seed rows")
    init_cmd.add_argument("--db", help="Database path")

    stats_cmd = subparsers.add_parser("stats", help="Show database statistics")
    stats_cmd.add_argument("--db", help="Database path")

    rep = subparsers.add_parser("report", help="Run reports (all when none given)")
    rep.add_argument("names", nargs="*", metavar="NAME", help="Report names, see `list`")
    rep.add_argument("--db", help="Database path")
    rep.add_argument("--html", help="Write an HTML report to this path")
    rep.add_argument("--verify", action="store_true", help="Check results against reference SQL")
    rep.add_argument("--verbose", "-v", action="store_true", help="Show log output")

    sql_cmd = subparsers.add_parser("sql", help="Show the reference SQL of a report")
    sql_cmd.add_argument("name", choices=[r.value for r in ReportName])

    subparsers.add_parser("list", help="List available reports")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "init-db":
            init_db(args.db)
        elif args.command == "stats":
            show_stats(args.db)
        elif args.command == "report":
            console.verbose = args.verbose
            if not run_reports(args.names, args.db, args.html, args.verify):
                console.print_error("Some reports do not match their reference SQL")
                sys.exit(2)
        elif args.command == "sql":
            show_sql(args.name)
        elif args.command == "list":
            console.print_report_list(REPORTS)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
