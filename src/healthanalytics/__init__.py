"""healthanalytics - Analytical reports over healthcare visit data.

This package provides:
- An immutable, integrity-checked dataset of patients, symptoms, diagnoses and visits
- A read-only reporting engine with dense and standard ranking
- A SQLite store with reference SQL for cross-checking reports
- Console and HTML output
"""

from __future__ import annotations

from healthanalytics.config.settings import Settings
from healthanalytics.core.errors import (
    HealthAnalyticsError,
    NoDataError,
    ReferentialIntegrityError,
    UnknownReportError,
)
from healthanalytics.core.models import (
    AnalyticsReport,
    Dataset,
    Diagnosis,
    Patient,
    ReportResult,
    Symptom,
    Visit,
)
from healthanalytics.core.types import RankStrategy, ReportName
from healthanalytics.orchestrator.pipeline import ReportPipeline
from healthanalytics.reporting.engine import ReportingEngine
from healthanalytics.storage.database import HealthcareDatabase
from healthanalytics.storage.sample import sample_dataset


__version__ = "0.1.0"

__all__ = [
    "AnalyticsReport",
    "Dataset",
    "Diagnosis",
    "HealthAnalyticsError",
    "HealthcareDatabase",
    "NoDataError",
    "Patient",
    "RankStrategy",
    "ReferentialIntegrityError",
    "ReportName",
    "ReportPipeline",
    "ReportResult",
    "ReportingEngine",
    "Settings",
    "Symptom",
    "UnknownReportError",
    "Visit",
    "sample_dataset",
]
