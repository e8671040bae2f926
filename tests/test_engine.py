"""Tests for the reporting engine."""

from __future__ import annotations

from datetime import date

import pytest

from healthanalytics.core.errors import NoDataError, UnknownReportError
from healthanalytics.core.models import Dataset, Diagnosis, Patient, Symptom, Visit
from healthanalytics.core.types import ReportName
from healthanalytics.reporting.engine import ReportingEngine


def make_dataset(
    patients: list[tuple[int, str, int, str]],
    visits: list[tuple[int, int, int, str]],
) -> Dataset:
    """Build a dataset from (id, name, age, city) patients and
    (patient_id, symptom_id, diagnosis_id, date) visits."""
    return Dataset(
        patients=tuple(
            Patient(patient_id=pid, patient_name=name, age=age, gender="Female", city=city)
            for pid, name, age, city in patients
        ),
        symptoms=tuple(Symptom(symptom_id=i, symptom_name=f"Symptom {i}") for i in range(1, 5)),
        diagnoses=(
            Diagnosis(diagnosis_id=1, diagnosis_name="Influenza"),
            Diagnosis(diagnosis_id=2, diagnosis_name="COVID-19"),
        ),
        visits=tuple(
            Visit(visit_id=vid, patient_id=pid, symptom_id=sid, diagnosis_id=did, visit_date=day)
            for vid, (pid, sid, did, day) in enumerate(visits, start=1)
        ),
    )


class TestPatientsByDiagnosis:
    def test_covid_patients(self, engine: ReportingEngine) -> None:
        names = {row.patient_name for row in engine.patients_by_diagnosis("COVID-19")}
        assert names == {"John Smith", "David Kim"}

    def test_names_are_distinct(self, engine: ReportingEngine) -> None:
        rows = engine.patients_by_diagnosis("Common Cold")
        names = [row.patient_name for row in rows]
        assert len(names) == len(set(names))
        assert set(names) == {"Jane Doe", "John Smith", "Mike Johnson"}

    @pytest.mark.parametrize("diagnosis", ["Measles", "covid-19", ""])
    def test_unknown_diagnosis_is_empty(self, engine: ReportingEngine, diagnosis: str) -> None:
        assert engine.patients_by_diagnosis(diagnosis) == []


class TestVisitsPerPatient:
    def test_counts(self, engine: ReportingEngine) -> None:
        counts = {row.patient_name: row.number_of_visits for row in engine.visits_per_patient()}
        assert counts == {
            "John Smith": 3,
            "Mike Johnson": 3,
            "Jane Doe": 2,
            "Lisa Jones": 1,
            "David Kim": 1,
        }

    def test_sorted_descending(self, engine: ReportingEngine) -> None:
        counts = [row.number_of_visits for row in engine.visits_per_patient()]
        assert counts == sorted(counts, reverse=True)

    def test_counts_sum_to_visit_total(self, engine: ReportingEngine, dataset: Dataset) -> None:
        total = sum(row.number_of_visits for row in engine.visits_per_patient())
        assert total == len(dataset.visits)

    def test_patient_without_visits_is_omitted(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo"), (2, "Bo", 40, "Oslo")], [(1, 1, 1, "2022-01-01")]
        )
        rows = ReportingEngine(dataset).visits_per_patient()
        assert [row.patient_name for row in rows] == ["Ann"]


class TestAverageAgeForDiagnosis:
    def test_pneumonia(self, engine: ReportingEngine) -> None:
        assert engine.average_age_for_diagnosis("Pneumonia") == 50

    def test_rounds_half_away_from_zero(self, engine: ReportingEngine) -> None:
        # visits 5 and 10: ages 60 and 45
        assert engine.average_age_for_diagnosis("COVID-19") == 53

    def test_averages_over_visits_not_patients(self, engine: ReportingEngine) -> None:
        # ages 32, 45, 50, 50 -> 44.25
        assert engine.average_age_for_diagnosis("Common Cold") == 44

    def test_unknown_diagnosis_raises(self, engine: ReportingEngine) -> None:
        with pytest.raises(NoDataError):
            engine.average_age_for_diagnosis("Measles")


class TestTopSymptoms:
    def test_top_three(self, engine: ReportingEngine) -> None:
        rows = engine.top_symptoms(3)
        assert {row.symptom_name for row in rows} == {"Cough", "Fever", "Fatigue"}
        assert [(row.symptom_name, row.symptom_count, row.rank) for row in rows] == [
            ("Cough", 4, 1),
            ("Fever", 3, 2),
            ("Fatigue", 2, 3),
        ]

    def test_default_is_three(self, engine: ReportingEngine) -> None:
        assert engine.top_symptoms() == engine.top_symptoms(3)

    def test_symptom_without_visits_is_omitted(self, engine: ReportingEngine) -> None:
        names = {row.symptom_name for row in engine.top_symptoms(10)}
        assert "Headache" not in names
        assert len(names) == 4

    def test_ties_overflow_the_limit(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo")],
            [
                (1, 1, 1, "2022-01-01"),
                (1, 1, 1, "2022-01-02"),
                (1, 2, 1, "2022-01-03"),
                (1, 2, 1, "2022-01-04"),
                (1, 3, 1, "2022-01-05"),
            ],
        )
        rows = ReportingEngine(dataset).top_symptoms(1)
        assert len(rows) == 2
        assert {row.symptom_name for row in rows} == {"Symptom 1", "Symptom 2"}
        assert {row.rank for row in rows} == {1}

    def test_zero_returns_nothing(self, engine: ReportingEngine) -> None:
        assert engine.top_symptoms(0) == []


class TestMostDistinctSymptoms:
    def test_tied_leaders(self, engine: ReportingEngine) -> None:
        rows = engine.most_distinct_symptoms()
        assert {row.patient_name for row in rows} == {"John Smith", "Mike Johnson"}
        assert all(row.symptom_count == 3 and row.rank == 1 for row in rows)

    def test_repeated_symptom_counts_once(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo"), (2, "Bo", 40, "Oslo")],
            [
                (1, 1, 1, "2022-01-01"),
                (1, 1, 1, "2022-01-02"),
                (1, 1, 1, "2022-01-03"),
                (2, 1, 1, "2022-01-01"),
                (2, 2, 1, "2022-01-02"),
            ],
        )
        rows = ReportingEngine(dataset).most_distinct_symptoms()
        assert [(row.patient_name, row.symptom_count) for row in rows] == [("Bo", 2)]


class TestCovidPercentage:
    def test_seed_data(self, engine: ReportingEngine) -> None:
        assert engine.covid_percentage() == 40.0

    def test_one_of_five_patients(self) -> None:
        dataset = make_dataset(
            [(i, f"Patient {i}", 30 + i, "Oslo") for i in range(1, 6)],
            [(1, 1, 2, "2022-01-01"), (1, 2, 2, "2022-02-01"), (2, 1, 1, "2022-01-01")],
        )
        assert ReportingEngine(dataset).covid_percentage() == 20.0

    def test_full_precision(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo"), (2, "Bo", 40, "Oslo"), (3, "Cy", 50, "Oslo")],
            [(1, 1, 2, "2022-01-01")],
        )
        assert ReportingEngine(dataset).covid_percentage() == pytest.approx(100 / 3)
        assert ReportingEngine(dataset).covid_percentage() != 33.0

    def test_other_diagnosis(self, engine: ReportingEngine) -> None:
        assert engine.diagnosis_percentage("Pneumonia") == 20.0
        assert engine.diagnosis_percentage("Measles") == 0.0

    def test_no_patients_raises(self, empty_engine: ReportingEngine) -> None:
        with pytest.raises(NoDataError):
            empty_engine.covid_percentage()


class TestTopCities:
    def test_seed_data(self, engine: ReportingEngine) -> None:
        rows = engine.top_cities()
        assert [(row.city, row.total_visits, row.rank) for row in rows] == [
            ("Seattle", 6, 1),
            ("Miami", 3, 2),
            ("Chicago", 1, 3),
        ]

    def test_limit(self, engine: ReportingEngine) -> None:
        assert [row.city for row in engine.top_cities(1)] == ["Seattle"]

    def test_ties_overflow_the_limit(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo"), (2, "Bo", 40, "Bergen"), (3, "Cy", 50, "Tromso")],
            [(1, 1, 1, "2022-01-01"), (2, 1, 1, "2022-01-01"), (3, 1, 1, "2022-01-01")],
        )
        rows = ReportingEngine(dataset).top_cities(2)
        assert len(rows) == 3
        assert {row.rank for row in rows} == {1}


class TestMostVisitsInADay:
    def test_seed_data(self, engine: ReportingEngine) -> None:
        rows = engine.most_visits_in_a_day()
        assert len(rows) == 1
        row = rows[0]
        assert (row.patient_name, row.visit_date, row.visit_count, row.rank) == (
            "Mike Johnson",
            date(2022, 5, 20),
            2,
            1,
        )

    def test_ties_share_first_rank(self) -> None:
        dataset = make_dataset(
            [(1, "Ann", 30, "Oslo"), (2, "Bo", 40, "Oslo")],
            [
                (1, 1, 1, "2022-01-01"),
                (1, 2, 1, "2022-01-01"),
                (2, 1, 1, "2022-03-01"),
                (2, 2, 1, "2022-03-01"),
                (2, 3, 1, "2022-04-01"),
            ],
        )
        rows = ReportingEngine(dataset).most_visits_in_a_day()
        assert {(row.patient_name, row.visit_date) for row in rows} == {
            ("Ann", date(2022, 1, 1)),
            ("Bo", date(2022, 3, 1)),
        }
        assert all(row.rank == 1 for row in rows)


class TestAveragePerDiagnosis:
    def test_seed_data(self, engine: ReportingEngine) -> None:
        rows = engine.average_age_per_diagnosis()
        assert [(row.diagnosis_name, row.avg_age) for row in rows] == [
            ("COVID-19", 53),
            ("Pneumonia", 50),
            ("Influenza", 45),
            ("Common Cold", 44),
            ("Bronchitis", 30),
        ]

    def test_matches_single_diagnosis_report(self, engine: ReportingEngine) -> None:
        for row in engine.average_age_per_diagnosis():
            assert row.avg_age == engine.average_age_for_diagnosis(row.diagnosis_name)


class TestCumulativeVisits:
    def test_seed_data(self, engine: ReportingEngine) -> None:
        rows = engine.cumulative_visits()
        assert [(row.visit_date.isoformat(), row.daily_count, row.cumulative_count) for row in rows] == [
            ("2022-01-01", 1, 1),
            ("2022-01-02", 2, 3),
            ("2022-01-03", 2, 5),
            ("2022-05-13", 1, 6),
            ("2022-05-20", 2, 8),
            ("2022-08-19", 1, 9),
            ("2022-12-01", 1, 10),
        ]

    def test_monotonic_and_ends_at_total(self, engine: ReportingEngine, dataset: Dataset) -> None:
        rows = engine.cumulative_visits()
        totals = [row.cumulative_count for row in rows]
        dates = [row.visit_date for row in rows]
        assert totals == sorted(totals)
        assert dates == sorted(dates)
        assert len(set(dates)) == len(dates)
        assert totals[-1] == len(dataset.visits)


class TestEmptyDataset:
    @pytest.mark.parametrize(
        "report",
        [
            ReportName.VISITS_PER_PATIENT,
            ReportName.TOP_SYMPTOMS,
            ReportName.MOST_DISTINCT_SYMPTOMS,
            ReportName.TOP_CITIES,
            ReportName.MOST_VISITS_IN_A_DAY,
            ReportName.AVERAGE_AGE_PER_DIAGNOSIS,
            ReportName.CUMULATIVE_VISITS,
        ],
    )
    def test_list_reports_are_empty(self, empty_engine: ReportingEngine, report: ReportName) -> None:
        assert getattr(empty_engine, report.value)() == []

    def test_filter_report_is_empty(self, empty_engine: ReportingEngine) -> None:
        assert empty_engine.patients_by_diagnosis("COVID-19") == []

    def test_average_raises(self, empty_engine: ReportingEngine) -> None:
        with pytest.raises(NoDataError):
            empty_engine.average_age_for_diagnosis("Pneumonia")

    def test_no_data_is_a_zero_division(self, empty_engine: ReportingEngine) -> None:
        with pytest.raises(ZeroDivisionError):
            empty_engine.covid_percentage()


class TestRun:
    def test_every_report_is_idempotent(self, engine: ReportingEngine) -> None:
        for report in ReportName:
            assert engine.run(report) == engine.run(report)

    def test_table_output(self, engine: ReportingEngine) -> None:
        result = engine.run("top_symptoms", n=2)
        assert result.name is ReportName.TOP_SYMPTOMS
        assert result.title == "Top 2 most common symptoms"
        assert result.columns == ["symptom_name", "symptom_count", "rank"]
        assert result.rows == [
            {"symptom_name": "Cough", "symptom_count": 4, "rank": 1},
            {"symptom_name": "Fever", "symptom_count": 3, "rank": 2},
        ]

    def test_scalar_report_becomes_single_row(self, engine: ReportingEngine) -> None:
        result = engine.run(ReportName.COVID_PERCENTAGE)
        assert result.rows == [{"covid_patients_percentage": 40.0}]
        assert result.title == "Percentage of patients diagnosed with COVID-19"

    def test_defaults_and_ignored_params(self, engine: ReportingEngine) -> None:
        result = engine.run(ReportName.AVERAGE_AGE_FOR_DIAGNOSIS, n=7, limit=2)
        assert result.rows == [{"avg_age": 50}]

    def test_unknown_report(self, engine: ReportingEngine) -> None:
        with pytest.raises(UnknownReportError):
            engine.run("top_doctors")

    def test_no_data_propagates(self, empty_engine: ReportingEngine) -> None:
        with pytest.raises(NoDataError):
            empty_engine.run(ReportName.COVID_PERCENTAGE)
