"""Healthcare database for loading datasets and executing reference SQL."""

from __future__ import annotations

import logging
import re
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from healthanalytics.core.models import Dataset, Diagnosis, Patient, Symptom, Visit
from healthanalytics.storage.sample import sample_dataset
from healthanalytics.storage.schema import INIT_SCHEMA, TABLES


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = logging.getLogger(__name__)

_LIMIT_CLAUSE = re.compile(r"\bLIMIT\s+(\d+|\?)", re.IGNORECASE)


class HealthcareDatabase:
    """SQLite store for the patients, symptoms, diagnoses and visits tables.

    Every operation opens its own connection, so ``db_path`` should point at
    a file rather than ``:memory:``.
    """

    def __init__(self, db_path: str | Path = "healthcare.db") -> None:
        self.db_path = Path(db_path)
        self._init_db()

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._connection() as conn:
            conn.executescript(INIT_SCHEMA)

    def execute_query(
        self, sql: str, params: Sequence[Any] = (), limit: int | None = 1000
    ) -> dict[str, Any]:
        """Execute a SQL query and return results.

        Args:
            sql: SQL query to execute.
            params: Positional parameters bound to ``?`` placeholders.
            limit: Maximum rows to return, or None for all rows.

        Returns:
            Dict with columns, rows, and count.
        """
        try:
            # Add LIMIT if not present
            if limit is not None and not _LIMIT_CLAUSE.search(sql):
                sql = f"{sql.strip().rstrip(';')} LIMIT {limit}"

            with self._connection() as conn:
                cursor = conn.execute(sql, tuple(params))
                columns = [desc[0] for desc in cursor.description] if cursor.description else []
                rows = [dict(row) for row in cursor.fetchall()]

            return {"success": True, "columns": columns, "rows": rows, "count": len(rows)}
        except sqlite3.Error as e:
            logger.warning("Query failed: %s", e)
            return {"success": False, "error": str(e), "columns": [], "rows": [], "count": 0}

    def is_empty(self) -> bool:
        with self._connection() as conn:
            return all(
                conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0] == 0  # noqa: S608
                for table in TABLES
            )

    def load_dataset(self, dataset: Dataset) -> None:
        """Insert every row of a dataset."""
        with self._connection() as conn:
            conn.executemany(
                "INSERT INTO patients VALUES (?, ?, ?, ?, ?)",
                [(p.patient_id, p.patient_name, p.age, p.gender, p.city) for p in dataset.patients],
            )
            conn.executemany(
                "INSERT INTO symptoms VALUES (?, ?)",
                [(s.symptom_id, s.symptom_name) for s in dataset.symptoms],
            )
            conn.executemany(
                "INSERT INTO diagnoses VALUES (?, ?)",
                [(d.diagnosis_id, d.diagnosis_name) for d in dataset.diagnoses],
            )
            conn.executemany(
                "INSERT INTO visits VALUES (?, ?, ?, ?, ?)",
                [
                    (v.visit_id, v.patient_id, v.symptom_id, v.diagnosis_id,
                     v.visit_date.isoformat())
                    for v in dataset.visits
                ],
            )
        logger.info(
            "Loaded %d patients, %d visits into %s",
            len(dataset.patients), len(dataset.visits), self.db_path,
        )

    def load_sample_data(self) -> bool:
        """Load the seed rows unless the database already holds data.

        Returns:
            True if the seed rows were inserted.
        """
        if not self.is_empty():
            logger.info("Database %s already populated, skipping seed data", self.db_path)
            return False
        self.load_dataset(sample_dataset())
        return True

    def to_dataset(self) -> Dataset:
        """Read all tables into a validated Dataset.

        Raises:
            ReferentialIntegrityError: If a visit references a missing row.
        """
        with self._connection() as conn:
            patients = conn.execute("SELECT * FROM patients ORDER BY patient_id").fetchall()
            symptoms = conn.execute("SELECT * FROM symptoms ORDER BY symptom_id").fetchall()
            diagnoses = conn.execute("SELECT * FROM diagnoses ORDER BY diagnosis_id").fetchall()
            visits = conn.execute("SELECT * FROM visits ORDER BY visit_id").fetchall()
        return Dataset(
            patients=tuple(Patient.model_validate(dict(r)) for r in patients),
            symptoms=tuple(Symptom.model_validate(dict(r)) for r in symptoms),
            diagnoses=tuple(Diagnosis.model_validate(dict(r)) for r in diagnoses),
            visits=tuple(Visit.model_validate(dict(r)) for r in visits),
        )

    def get_stats(self) -> dict[str, int]:
        """Get database statistics."""
        with self._connection() as conn:
            return {
                table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]  # noqa: S608
                for table in TABLES
            }
