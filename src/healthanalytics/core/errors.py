"""Exceptions raised by the dataset and reporting layers."""

from __future__ import annotations


class HealthAnalyticsError(Exception):
    """Base class for healthanalytics errors."""


class NoDataError(HealthAnalyticsError, ZeroDivisionError):
    """A percentage or average was requested over an empty divisor."""


class ReferentialIntegrityError(HealthAnalyticsError):
    """A dataset row references a missing key or repeats a primary key."""


class UnknownReportError(HealthAnalyticsError, KeyError):
    """The requested report is not registered."""
