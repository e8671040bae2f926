"""Core module - Data models, ranking and shared types."""

from __future__ import annotations

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
    ReportCheck,
    ReportResult,
    Symptom,
    Visit,
)
from healthanalytics.core.ranking import dense_rank, rank, standard_rank
from healthanalytics.core.types import RankStrategy, ReportName
from healthanalytics.core.utils import percentage, rounded_mean


__all__ = [
    # Models
    "AnalyticsReport",
    "Dataset",
    "Diagnosis",
    # Errors
    "HealthAnalyticsError",
    "NoDataError",
    "Patient",
    # Types
    "RankStrategy",
    "ReferentialIntegrityError",
    "ReportCheck",
    "ReportName",
    "ReportResult",
    "Symptom",
    "UnknownReportError",
    "Visit",
    # Ranking
    "dense_rank",
    # Utils
    "percentage",
    "rank",
    "rounded_mean",
    "standard_rank",
]
