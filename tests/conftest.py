"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from healthanalytics.config.settings import Settings
from healthanalytics.core.models import Dataset
from healthanalytics.reporting.engine import ReportingEngine
from healthanalytics.storage.database import HealthcareDatabase
from healthanalytics.storage.sample import sample_dataset


@pytest.fixture
def dataset() -> Dataset:
    """Seed dataset built in memory."""
    return sample_dataset()


@pytest.fixture
def engine(dataset: Dataset) -> ReportingEngine:
    """Reporting engine over the seed dataset."""
    return ReportingEngine(dataset)


@pytest.fixture
def empty_engine() -> ReportingEngine:
    """Reporting engine over a dataset with no rows."""
    return ReportingEngine(Dataset())


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary database file."""
    return tmp_path / "healthcare.db"


@pytest.fixture
def seeded_db(db_path: Path) -> HealthcareDatabase:
    """Temporary database loaded with the seed rows."""
    db = HealthcareDatabase(db_path)
    db.load_sample_data()
    return db


@pytest.fixture
def settings(db_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the environment and pointed at the temp database."""
    for var in (
        "HEALTH_DB_PATH",
        "REPORT_TOP_SYMPTOMS",
        "REPORT_TOP_CITIES",
        "REPORT_COVID_DIAGNOSIS",
        "REPORT_AGE_DIAGNOSIS",
    ):
        monkeypatch.delenv(var, raising=False)
    settings = Settings()
    settings.database.path = str(db_path)
    return settings
