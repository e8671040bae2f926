"""Storage layer for the healthcare tables."""

from healthanalytics.storage.database import HealthcareDatabase
from healthanalytics.storage.sample import sample_dataset

__all__ = ["HealthcareDatabase", "sample_dataset"]
