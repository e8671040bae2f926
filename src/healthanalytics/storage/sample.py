"""Seed rows for the healthcare tables."""

from __future__ import annotations

from healthanalytics.core.models import Dataset, Diagnosis, Patient, Symptom, Visit


SAMPLE_PATIENTS = [
    (1, "John Smith", 45, "Male", "Seattle"),
    (2, "Jane Doe", 32, "Female", "Miami"),
    (3, "Mike Johnson", 50, "Male", "Seattle"),
    (4, "Lisa Jones", 28, "Female", "Miami"),
    (5, "David Kim", 60, "Male", "Chicago"),
]

SAMPLE_SYMPTOMS = [
    (1, "Fever"), (2, "Cough"), (3, "Difficulty Breathing"), (4, "Fatigue"), (5, "Headache"),
]

SAMPLE_DIAGNOSES = [
    (1, "Common Cold"), (2, "Influenza"), (3, "Pneumonia"), (4, "Bronchitis"), (5, "COVID-19"),
]

SAMPLE_VISITS = [
    (1, 1, 1, 2, "2022-01-01"),
    (2, 2, 2, 1, "2022-01-02"),
    (3, 3, 3, 3, "2022-01-02"),
    (4, 4, 1, 4, "2022-01-03"),
    (5, 5, 2, 5, "2022-01-03"),
    (6, 1, 4, 1, "2022-05-13"),
    (7, 3, 4, 1, "2022-05-20"),
    (8, 3, 2, 1, "2022-05-20"),
    (9, 2, 1, 4, "2022-08-19"),
    (10, 1, 2, 5, "2022-12-01"),
]


def sample_dataset() -> Dataset:
    """Build the seed dataset in memory."""
    return Dataset(
        patients=tuple(
            Patient(patient_id=pid, patient_name=name, age=age, gender=gender, city=city)
            for pid, name, age, gender, city in SAMPLE_PATIENTS
        ),
        symptoms=tuple(Symptom(symptom_id=sid, symptom_name=name) for sid, name in SAMPLE_SYMPTOMS),
        diagnoses=tuple(
            Diagnosis(diagnosis_id=did, diagnosis_name=name) for did, name in SAMPLE_DIAGNOSES
        ),
        visits=tuple(
            Visit(visit_id=vid, patient_id=pid, symptom_id=sid, diagnosis_id=did, visit_date=day)
            for vid, pid, sid, did, day in SAMPLE_VISITS
        ),
    )
