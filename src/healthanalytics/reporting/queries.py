"""Report catalog with titles, output columns and reference SQL.

The SQL targets SQLite and uses positional ``?`` placeholders bound from the
report parameters in the order given by ``parameters``.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from healthanalytics.core.errors import UnknownReportError
from healthanalytics.core.types import ReportName


class ReportDefinition(NamedTuple):
    """Static description of a report."""

    title: str
    columns: tuple[str, ...]
    sql: str
    parameters: tuple[tuple[str, Any], ...] = ()

    def resolve(self, params: dict[str, Any]) -> dict[str, Any]:
        """Pick this report's parameters from ``params``, filling defaults."""
        return {name: params.get(name, default) for name, default in self.parameters}

    def bind(self, params: dict[str, Any]) -> tuple[Any, ...]:
        """Order parameters for the reference SQL placeholders."""
        return tuple(self.resolve(params).values())


_JOIN_PATIENT_VISIT_DIAGNOSIS = """
FROM patients p
JOIN visits v ON p.patient_id = v.patient_id
JOIN diagnoses d ON v.diagnosis_id = d.diagnosis_id"""


REPORTS: dict[ReportName, ReportDefinition] = {
    ReportName.PATIENTS_BY_DIAGNOSIS: ReportDefinition(
        title="Patients diagnosed with {diagnosis}",
        columns=("patient_name",),
        sql=f"""
SELECT DISTINCT p.patient_name{_JOIN_PATIENT_VISIT_DIAGNOSIS}
WHERE d.diagnosis_name = ?""",
        parameters=(("diagnosis", "COVID-19"),),
    ),
    ReportName.VISITS_PER_PATIENT: ReportDefinition(
        title="Number of visits per patient",
        columns=("patient_name", "number_of_visits"),
        sql="""
SELECT p.patient_name, COUNT(v.visit_id) AS number_of_visits
FROM patients p
JOIN visits v ON p.patient_id = v.patient_id
GROUP BY p.patient_name
ORDER BY number_of_visits DESC""",
    ),
    ReportName.AVERAGE_AGE_FOR_DIAGNOSIS: ReportDefinition(
        title="Average age of patients diagnosed with {diagnosis}",
        columns=("avg_age",),
        sql=f"""
SELECT ROUND(AVG(p.age), 0) AS avg_age{_JOIN_PATIENT_VISIT_DIAGNOSIS}
WHERE d.diagnosis_name = ?""",
        parameters=(("diagnosis", "Pneumonia"),),
    ),
    ReportName.TOP_SYMPTOMS: ReportDefinition(
        title="Top {n} most common symptoms",
        columns=("symptom_name", "symptom_count", "rank"),
        sql="""
WITH symptom_counts AS (
    SELECT s.symptom_name, COUNT(*) AS symptom_count
    FROM symptoms s
    JOIN visits v ON s.symptom_id = v.symptom_id
    GROUP BY s.symptom_name
)
SELECT symptom_name, symptom_count, rnk AS "rank"
FROM (
    SELECT symptom_name, symptom_count,
        DENSE_RANK() OVER (ORDER BY symptom_count DESC) AS rnk
    FROM symptom_counts
) AS ranked
WHERE rnk <= ?""",
        parameters=(("n", 3),),
    ),
    ReportName.MOST_DISTINCT_SYMPTOMS: ReportDefinition(
        title="Patients with the most distinct symptoms",
        columns=("patient_name", "symptom_count", "rank"),
        sql="""
WITH patient_symptoms AS (
    SELECT p.patient_name, COUNT(DISTINCT v.symptom_id) AS symptom_count
    FROM patients p
    JOIN visits v ON p.patient_id = v.patient_id
    GROUP BY p.patient_name
)
SELECT patient_name, symptom_count, rnk AS "rank"
FROM (
    SELECT patient_name, symptom_count,
        DENSE_RANK() OVER (ORDER BY symptom_count DESC) AS rnk
    FROM patient_symptoms
) AS ranked
WHERE rnk = 1""",
    ),
    ReportName.COVID_PERCENTAGE: ReportDefinition(
        title="Percentage of patients diagnosed with {diagnosis}",
        columns=("covid_patients_percentage",),
        sql="""
WITH covid_patients AS (
    SELECT COUNT(DISTINCT v.patient_id) AS covid_count
    FROM visits v
    JOIN diagnoses d ON v.diagnosis_id = d.diagnosis_id
    WHERE d.diagnosis_name = ?
),
total_patients AS (
    SELECT COUNT(*) AS total_count FROM patients
)
SELECT (covid_count * 100.0) / total_count AS covid_patients_percentage
FROM covid_patients, total_patients""",
        parameters=(("diagnosis", "COVID-19"),),
    ),
    ReportName.TOP_CITIES: ReportDefinition(
        title="Top {limit} cities by number of visits",
        columns=("city", "total_visits", "rank"),
        sql="""
SELECT city, total_visits, rnk AS "rank"
FROM (
    SELECT p.city, COUNT(v.visit_id) AS total_visits,
        DENSE_RANK() OVER (ORDER BY COUNT(v.visit_id) DESC) AS rnk
    FROM patients p
    JOIN visits v ON p.patient_id = v.patient_id
    GROUP BY p.city
) AS ranked
WHERE rnk <= ?""",
        parameters=(("limit", 5),),
    ),
    ReportName.MOST_VISITS_IN_A_DAY: ReportDefinition(
        title="Patients with the most visits in a single day",
        columns=("patient_name", "visit_date", "visit_count", "rank"),
        sql="""
SELECT patient_name, visit_date, visit_count, rnk AS "rank"
FROM (
    SELECT p.patient_name, v.visit_date, COUNT(*) AS visit_count,
        RANK() OVER (ORDER BY COUNT(*) DESC) AS rnk
    FROM patients p
    JOIN visits v ON p.patient_id = v.patient_id
    GROUP BY p.patient_name, v.visit_date
) AS ranked
WHERE rnk = 1""",
    ),
    ReportName.AVERAGE_AGE_PER_DIAGNOSIS: ReportDefinition(
        title="Average age per diagnosis",
        columns=("diagnosis_name", "avg_age"),
        sql=f"""
SELECT d.diagnosis_name, ROUND(AVG(p.age), 0) AS avg_age{_JOIN_PATIENT_VISIT_DIAGNOSIS}
GROUP BY d.diagnosis_name
ORDER BY avg_age DESC""",
    ),
    ReportName.CUMULATIVE_VISITS: ReportDefinition(
        title="Cumulative visits over time",
        columns=("visit_date", "daily_count", "cumulative_count"),
        sql="""
WITH daily_visits AS (
    SELECT visit_date, COUNT(*) AS daily_count
    FROM visits
    GROUP BY visit_date
)
SELECT visit_date, daily_count,
    SUM(daily_count) OVER (
        ORDER BY visit_date
        ROWS BETWEEN UNBOUNDED PRECEDING AND CURRENT ROW
    ) AS cumulative_count
FROM daily_visits
ORDER BY visit_date""",
    ),
}


def get_report(name: ReportName | str) -> tuple[ReportName, ReportDefinition]:
    """Resolve a report name to its definition.

    Raises:
        UnknownReportError: If no report has that name.
    """
    try:
        report = ReportName(name)
    except ValueError:
        msg = f"Unknown report: {name}"
        raise UnknownReportError(msg) from None
    return report, REPORTS[report]

