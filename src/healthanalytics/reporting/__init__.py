"""Reporting module - Analytical reports over the healthcare tables."""

from __future__ import annotations

from healthanalytics.reporting.engine import ReportingEngine
from healthanalytics.reporting.queries import REPORTS, ReportDefinition, get_report


__all__ = [
    "REPORTS",
    "ReportDefinition",
    "ReportingEngine",
    "get_report",
]
