"""Pipeline orchestrator for running and verifying reports."""

from __future__ import annotations

import logging
import time
from collections import Counter
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

from healthanalytics.config.settings import Settings
from healthanalytics.core.errors import NoDataError
from healthanalytics.core.models import AnalyticsReport, ReportCheck, ReportResult
from healthanalytics.core.types import ReportName
from healthanalytics.reporting.engine import ReportingEngine
from healthanalytics.reporting.queries import get_report
from healthanalytics.storage.database import HealthcareDatabase
from healthanalytics.tools.html import HTMLExporter
from healthanalytics.tools.sql import SQLValidator


if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _normalize(value: Any) -> Any:
    """Make engine and SQLite values comparable."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return value


def _row_counter(rows: list[dict[str, Any]], columns: list[str]) -> Counter[tuple[Any, ...]]:
    return Counter(tuple(_normalize(row.get(col)) for col in columns) for row in rows)


class ReportPipeline:
    """Loads a dataset, runs reports, and optionally verifies and exports them."""

    def __init__(
        self,
        settings: Settings | None = None,
        database: HealthcareDatabase | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self._db = database or HealthcareDatabase(settings.database.path)
        self._validator = SQLValidator()
        self._exporter = HTMLExporter()

    @property
    def database(self) -> HealthcareDatabase:
        return self._db

    def _params_for(self, report: ReportName) -> dict[str, Any]:
        """Report parameters taken from settings."""
        reports = self.settings.reports
        diagnosis = (
            reports.age_diagnosis
            if report is ReportName.AVERAGE_AGE_FOR_DIAGNOSIS
            else reports.covid_diagnosis
        )
        return {"diagnosis": diagnosis, "n": reports.top_symptoms, "limit": reports.top_cities}

    def run_report(self, engine: ReportingEngine, report: ReportName) -> ReportResult:
        """Run one report, recording NoDataError on the result instead of raising."""
        params = self._params_for(report)
        try:
            return engine.run(report, **params)
        except NoDataError as e:
            logger.warning("Report %s has no data: %s", report.value, e)
            _, definition = get_report(report)
            return ReportResult(
                name=report,
                title=definition.title.format(**definition.resolve(params)),
                columns=list(definition.columns),
                error=str(e),
            )

    def verify(self, result: ReportResult) -> ReportCheck:
        """Compare a report result with its reference SQL executed on the database.

        Rows are compared as multisets. A report that raised NoDataError
        matches when the SQL returns only NULLs.
        """
        _, definition = get_report(result.name)
        check = ReportCheck(name=result.name, engine_rows=result.count)
        validation = self._validator.validate(definition.sql)
        check.warnings = validation["warnings"]
        if not validation["is_valid"]:
            check.error = validation["error"]
            return check

        params = definition.bind(self._params_for(result.name))
        executed = self._db.execute_query(definition.sql, params, limit=None)
        if not executed["success"]:
            check.error = executed["error"]
            return check
        check.sql_rows = executed["count"]

        if result.error is not None:
            check.matched = all(
                value is None for row in executed["rows"] for value in row.values()
            )
            return check
        check.matched = _row_counter(result.rows, result.columns) == _row_counter(
            executed["rows"], result.columns
        )
        if not check.matched:
            logger.warning("Report %s does not match its reference SQL", result.name.value)
        return check

    def run(
        self,
        reports: Iterable[ReportName | str] | None = None,
        verify: bool = False,
        html_path: str | Path | None = None,
    ) -> AnalyticsReport:
        """Run the selected reports (all by default) against the database."""
        start_time = time.time()
        selected = [get_report(name)[0] for name in reports] if reports else list(ReportName)

        logger.info("Loading dataset from %s", self._db.db_path)
        dataset = self._db.to_dataset()
        engine = ReportingEngine(dataset)
        logger.info(
            "Loaded %d patients and %d visits", len(dataset.patients), len(dataset.visits)
        )

        results = [self.run_report(engine, report) for report in selected]
        logger.info("Ran %d reports", len(results))

        checks: list[ReportCheck] = []
        if verify:
            checks = [self.verify(result) for result in results]
            logger.info(
                "Verified %d/%d reports against SQL",
                sum(check.matched for check in checks), len(checks),
            )

        report = AnalyticsReport(
            source_path=str(Path(self._db.db_path).absolute()),
            stats=self._db.get_stats(),
            results=results,
            checks=checks,
            processing_time_seconds=time.time() - start_time,
        )
        if html_path is not None:
            self._exporter.export(report, html_path)
        return report
