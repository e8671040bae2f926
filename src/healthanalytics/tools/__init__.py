"""Tools module - SQL validation and HTML export."""

from __future__ import annotations

from healthanalytics.tools.html import HTMLExporter
from healthanalytics.tools.sql import SQLValidator


__all__ = [
    "HTMLExporter",
    "SQLValidator",
]
