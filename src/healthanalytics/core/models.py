"""Data models for the healthcare analytics system."""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime  # noqa: TC003 - Pydantic needs at runtime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from healthanalytics.core.errors import ReferentialIntegrityError
from healthanalytics.core.types import ReportName  # noqa: TC001 - Pydantic needs at runtime


class Patient(BaseModel):
    """A registered patient."""
    model_config = ConfigDict(frozen=True)

    patient_id: int
    patient_name: str
    age: int
    gender: str
    city: str


class Symptom(BaseModel):
    """A symptom reported during a visit."""
    model_config = ConfigDict(frozen=True)

    symptom_id: int
    symptom_name: str


class Diagnosis(BaseModel):
    """A diagnosis given during a visit."""
    model_config = ConfigDict(frozen=True)

    diagnosis_id: int
    diagnosis_name: str


class Visit(BaseModel):
    """A single patient visit linking a symptom and a diagnosis."""
    model_config = ConfigDict(frozen=True)

    visit_id: int
    patient_id: int
    symptom_id: int
    diagnosis_id: int
    visit_date: date


def _unique_keys(table: str, keys: list[int]) -> set[int]:
    duplicates = sorted(key for key, count in Counter(keys).items() if count > 1)
    if duplicates:
        msg = f"Duplicate primary key(s) in {table}: {duplicates}"
        raise ReferentialIntegrityError(msg)
    return set(keys)


class Dataset(BaseModel):
    """The four healthcare tables, validated once and immutable afterwards.

    Building a Dataset checks that every primary key is unique and that every
    visit references an existing patient, symptom and diagnosis. Violations
    raise ReferentialIntegrityError.
    """
    model_config = ConfigDict(frozen=True)

    patients: tuple[Patient, ...] = ()
    symptoms: tuple[Symptom, ...] = ()
    diagnoses: tuple[Diagnosis, ...] = ()
    visits: tuple[Visit, ...] = ()

    @model_validator(mode="after")
    def check_integrity(self) -> Dataset:
        patient_ids = _unique_keys("patients", [p.patient_id for p in self.patients])
        symptom_ids = _unique_keys("symptoms", [s.symptom_id for s in self.symptoms])
        diagnosis_ids = _unique_keys("diagnoses", [d.diagnosis_id for d in self.diagnoses])
        _unique_keys("visits", [v.visit_id for v in self.visits])
        for visit in self.visits:
            for column, value, known in (
                ("patient_id", visit.patient_id, patient_ids),
                ("symptom_id", visit.symptom_id, symptom_ids),
                ("diagnosis_id", visit.diagnosis_id, diagnosis_ids),
            ):
                if value not in known:
                    msg = f"Visit {visit.visit_id} references missing {column} {value}"
                    raise ReferentialIntegrityError(msg)
        return self

    @property
    def is_empty(self) -> bool:
        return not (self.patients or self.symptoms or self.diagnoses or self.visits)


class PatientRow(BaseModel):
    """A patient name projected from a filtered join."""
    patient_name: str


class PatientVisitCount(BaseModel):
    """Number of visits recorded for a patient."""
    patient_name: str
    number_of_visits: int


class SymptomRank(BaseModel):
    """A symptom with its occurrence count and dense rank."""
    symptom_name: str
    symptom_count: int
    rank: int


class PatientSymptomRank(BaseModel):
    """A patient with the number of distinct symptoms reported."""
    patient_name: str
    symptom_count: int
    rank: int


class CityRank(BaseModel):
    """A city with its visit total and dense rank."""
    city: str
    total_visits: int
    rank: int


class DailyVisitRank(BaseModel):
    """Visits made by one patient on one day, with standard rank."""
    patient_name: str
    visit_date: date
    visit_count: int
    rank: int


class DiagnosisAverageAge(BaseModel):
    """Average patient age across the visits of a diagnosis."""
    diagnosis_name: str
    avg_age: int


class CumulativeVisits(BaseModel):
    """Visits on a date together with the running total up to that date."""
    visit_date: date
    daily_count: int
    cumulative_count: int


class ReportResult(BaseModel):
    """Tabular output of a single report."""
    name: ReportName
    title: str
    columns: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    error: str | None = None

    @property
    def count(self) -> int:
        return len(self.rows)


class ReportCheck(BaseModel):
    """Comparison of a report against its reference SQL."""
    name: ReportName
    matched: bool = False
    engine_rows: int = 0
    sql_rows: int = 0
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None


class AnalyticsReport(BaseModel):
    """Complete output of a pipeline run."""
    source_path: str
    generated_at: datetime = Field(default_factory=datetime.now)
    stats: dict[str, int] = Field(default_factory=dict)
    results: list[ReportResult] = Field(default_factory=list)
    checks: list[ReportCheck] = Field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def all_checks_passed(self) -> bool:
        return all(check.matched for check in self.checks)

    def to_template_data(self) -> dict[str, Any]:
        """Convert to data for HTML template."""
        checks = {check.name: check for check in self.checks}
        return {
            "source_path": self.source_path,
            "generated_at": self.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
            "processing_time": f"{self.processing_time_seconds:.2f}s",
            "stats": self.stats,
            "reports": [
                {
                    "name": result.name.value,
                    "title": result.title,
                    "columns": result.columns,
                    "rows": result.rows,
                    "error": result.error,
                    "verified": result.name in checks,
                    "matched": checks[result.name].matched if result.name in checks else False,
                }
                for result in self.results
            ],
        }
