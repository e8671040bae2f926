"""Database schema for the healthcare tables."""

from __future__ import annotations


INIT_SCHEMA = """
CREATE TABLE IF NOT EXISTS patients (
    patient_id INTEGER PRIMARY KEY,
    patient_name VARCHAR(50),
    age INTEGER,
    gender VARCHAR(10),
    city VARCHAR(50)
);

CREATE TABLE IF NOT EXISTS symptoms (
    symptom_id INTEGER PRIMARY KEY,
    symptom_name VARCHAR(50)
);

CREATE TABLE IF NOT EXISTS diagnoses (
    diagnosis_id INTEGER PRIMARY KEY,
    diagnosis_name VARCHAR(50)
);

CREATE TABLE IF NOT EXISTS visits (
    visit_id INTEGER PRIMARY KEY,
    patient_id INTEGER,
    symptom_id INTEGER,
    diagnosis_id INTEGER,
    visit_date DATE,
    FOREIGN KEY (patient_id) REFERENCES patients(patient_id),
    FOREIGN KEY (symptom_id) REFERENCES symptoms(symptom_id),
    FOREIGN KEY (diagnosis_id) REFERENCES diagnoses(diagnosis_id)
);

CREATE INDEX IF NOT EXISTS idx_visits_patient ON visits(patient_id);
CREATE INDEX IF NOT EXISTS idx_visits_diagnosis ON visits(diagnosis_id);
CREATE INDEX IF NOT EXISTS idx_visits_date ON visits(visit_date);
"""

TABLES = ("patients", "symptoms", "diagnoses", "visits")
