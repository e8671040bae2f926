"""Application settings and configuration."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """SQLite database configuration."""

    path: str = "healthcare.db"


class ReportSettings(BaseModel):
    """Report parameter defaults."""

    model_config = ConfigDict(validate_assignment=True)

    top_symptoms: int = Field(default=3, ge=1)
    top_cities: int = Field(default=5, ge=1)
    covid_diagnosis: str = "COVID-19"
    age_diagnosis: str = "Pneumonia"


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Database Configuration
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    # Report Configuration
    reports: ReportSettings = Field(default_factory=ReportSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        if path := os.getenv("HEALTH_DB_PATH"):
            self.database.path = path

        if top := os.getenv("REPORT_TOP_SYMPTOMS"):
            self.reports.top_symptoms = int(top)
        if top := os.getenv("REPORT_TOP_CITIES"):
            self.reports.top_cities = int(top)
        if name := os.getenv("REPORT_COVID_DIAGNOSIS"):
            self.reports.covid_diagnosis = name
        if name := os.getenv("REPORT_AGE_DIAGNOSIS"):
            self.reports.age_diagnosis = name
