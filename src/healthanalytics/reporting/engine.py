"""Read-only reporting engine over an in-memory healthcare dataset."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from itertools import accumulate
from operator import itemgetter
from typing import TYPE_CHECKING, Any

from healthanalytics.core.models import (
    CityRank,
    CumulativeVisits,
    DailyVisitRank,
    DiagnosisAverageAge,
    PatientRow,
    PatientSymptomRank,
    PatientVisitCount,
    ReportResult,
    SymptomRank,
)
from healthanalytics.core.ranking import dense_rank, standard_rank
from healthanalytics.core.utils import percentage, rounded_mean
from healthanalytics.reporting.queries import get_report


if TYPE_CHECKING:
    from collections.abc import Iterator

    from healthanalytics.core.models import Dataset, Diagnosis, Patient, Symptom, Visit
    from healthanalytics.core.types import ReportName

logger = logging.getLogger(__name__)

COVID_DIAGNOSIS = "COVID-19"


class ReportingEngine:
    """Computes the analytical reports over a frozen Dataset.

    Every report is a pure function of the dataset: calling it twice returns
    equal results, and nothing is cached between calls apart from the primary
    key lookups built once here. Reports over an empty dataset return empty
    results, except averages and percentages, which raise NoDataError when
    their divisor is zero.

    Group order before sorting is the order in which each group first appears
    when visits are scanned in dataset order; sorts are stable, so ties keep
    that order.
    """

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset
        self._patients = {p.patient_id: p for p in dataset.patients}
        self._symptoms = {s.symptom_id: s for s in dataset.symptoms}
        self._diagnoses = {d.diagnosis_id: d for d in dataset.diagnoses}

    def _joined(self) -> Iterator[tuple[Visit, Patient, Symptom, Diagnosis]]:
        """Inner join of visits with their patient, symptom and diagnosis."""
        for visit in self.dataset.visits:
            yield (
                visit,
                self._patients[visit.patient_id],
                self._symptoms[visit.symptom_id],
                self._diagnoses[visit.diagnosis_id],
            )

    def patients_by_diagnosis(self, diagnosis: str) -> list[PatientRow]:
        """Distinct names of patients with at least one visit for ``diagnosis``."""
        names = dict.fromkeys(
            patient.patient_name
            for _, patient, _, diag in self._joined()
            if diag.diagnosis_name == diagnosis
        )
        return [PatientRow(patient_name=name) for name in names]

    def visits_per_patient(self) -> list[PatientVisitCount]:
        """Visit counts per patient name, highest first."""
        counts = Counter(patient.patient_name for _, patient, _, _ in self._joined())
        return [
            PatientVisitCount(patient_name=name, number_of_visits=count)
            for name, count in sorted(counts.items(), key=itemgetter(1), reverse=True)
        ]

    def average_age_for_diagnosis(self, diagnosis: str) -> int:
        """Rounded mean age over the visits diagnosed with ``diagnosis``.

        Raises:
            NoDataError: If no visit has that diagnosis.
        """
        ages = [
            patient.age
            for _, patient, _, diag in self._joined()
            if diag.diagnosis_name == diagnosis
        ]
        return rounded_mean(ages, what=f"ages for diagnosis {diagnosis!r}")

    def top_symptoms(self, n: int = 3) -> list[SymptomRank]:
        """Symptoms whose dense rank by visit count is at most ``n``.

        Tied symptoms share a rank, so more than ``n`` rows can be returned.
        """
        counts = Counter(symptom.symptom_name for _, _, symptom, _ in self._joined())
        return [
            SymptomRank(symptom_name=name, symptom_count=count, rank=position)
            for position, (name, count) in dense_rank(counts.items(), key=itemgetter(1))
            if position <= n
        ]

    def most_distinct_symptoms(self) -> list[PatientSymptomRank]:
        """Patients tied for the highest number of distinct symptoms."""
        symptoms: dict[str, set[int]] = defaultdict(set)
        for visit, patient, _, _ in self._joined():
            symptoms[patient.patient_name].add(visit.symptom_id)
        counts = ((name, len(ids)) for name, ids in symptoms.items())
        return [
            PatientSymptomRank(patient_name=name, symptom_count=count, rank=position)
            for position, (name, count) in dense_rank(counts, key=itemgetter(1))
            if position == 1
        ]

    def diagnosis_percentage(self, diagnosis: str) -> float:
        """Percentage of all patients with at least one visit for ``diagnosis``.

        Raises:
            NoDataError: If the dataset has no patients.
        """
        diagnosed = {
            visit.patient_id
            for visit, _, _, diag in self._joined()
            if diag.diagnosis_name == diagnosis
        }
        return percentage(len(diagnosed), len(self.dataset.patients), what="patient count")

    def covid_percentage(self, diagnosis: str = COVID_DIAGNOSIS) -> float:
        return self.diagnosis_percentage(diagnosis)

    def top_cities(self, limit: int = 5) -> list[CityRank]:
        """Cities whose dense rank by visit count is at most ``limit``."""
        counts = Counter(patient.city for _, patient, _, _ in self._joined())
        return [
            CityRank(city=city, total_visits=count, rank=position)
            for position, (city, count) in dense_rank(counts.items(), key=itemgetter(1))
            if position <= limit
        ]

    def most_visits_in_a_day(self) -> list[DailyVisitRank]:
        """Patient-days with the most visits, using standard rank."""
        counts = Counter(
            (patient.patient_name, visit.visit_date) for visit, patient, _, _ in self._joined()
        )
        return [
            DailyVisitRank(patient_name=name, visit_date=day, visit_count=count, rank=position)
            for position, ((name, day), count) in standard_rank(counts.items(), key=itemgetter(1))
            if position == 1
        ]

    def average_age_per_diagnosis(self) -> list[DiagnosisAverageAge]:
        """Rounded mean age per diagnosis, oldest first."""
        ages: dict[str, list[int]] = defaultdict(list)
        for _, patient, _, diag in self._joined():
            ages[diag.diagnosis_name].append(patient.age)
        rows = [
            DiagnosisAverageAge(diagnosis_name=name, avg_age=rounded_mean(values))
            for name, values in ages.items()
        ]
        return sorted(rows, key=lambda row: row.avg_age, reverse=True)

    def cumulative_visits(self) -> list[CumulativeVisits]:
        """Daily visit counts with a running total, in date order."""
        daily = sorted(Counter(visit.visit_date for visit in self.dataset.visits).items())
        totals = accumulate(count for _, count in daily)
        return [
            CumulativeVisits(visit_date=day, daily_count=count, cumulative_count=total)
            for (day, count), total in zip(daily, totals)
        ]

    def run(self, name: ReportName | str, **params: Any) -> ReportResult:
        """Run a report by name and return it as a table.

        Args:
            name: Report name.
            **params: Report parameters (``diagnosis``, ``n``, ``limit``).
                Parameters the report does not take are ignored.

        Returns:
            ReportResult with one dict per row.

        Raises:
            UnknownReportError: If the report does not exist.
            NoDataError: If an average or percentage has nothing to divide by.
        """
        report, definition = get_report(name)
        resolved = definition.resolve(params)
        logger.debug("Running report %s with %s", report.value, resolved)
        output = getattr(self, report.value)(**resolved)
        if isinstance(output, list):
            rows = [row.model_dump() for row in output]
        else:
            rows = [{definition.columns[0]: output}]
        return ReportResult(
            name=report,
            title=definition.title.format(**resolved),
            columns=list(definition.columns),
            rows=rows,
        )
