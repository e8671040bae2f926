"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum


class RankStrategy(str, Enum):
    """Tie policies for ranking grouped results."""

    DENSE = "dense"
    STANDARD = "standard"


class ReportName(str, Enum):
    """Names of the analytical reports."""

    PATIENTS_BY_DIAGNOSIS = "patients_by_diagnosis"
    VISITS_PER_PATIENT = "visits_per_patient"
    AVERAGE_AGE_FOR_DIAGNOSIS = "average_age_for_diagnosis"
    TOP_SYMPTOMS = "top_symptoms"
    MOST_DISTINCT_SYMPTOMS = "most_distinct_symptoms"
    COVID_PERCENTAGE = "covid_percentage"
    TOP_CITIES = "top_cities"
    MOST_VISITS_IN_A_DAY = "most_visits_in_a_day"
    AVERAGE_AGE_PER_DIAGNOSIS = "average_age_per_diagnosis"
    CUMULATIVE_VISITS = "cumulative_visits"
