"""
Repository for patient history database operations.

Dates of service have only ever been written as YYYY-MM-DD, so they are
decoded strictly; anything else is reported as malformed stored data.
"""
import sqlite3
from typing import Any, Tuple

from core.dates import parse_canonical, to_canonical
from models import PatientHistory
from repositories.base import CrudRepository


class PatientHistoryRepository(CrudRepository[PatientHistory, str]):
    """
    Repository for patient history CRUD operations.

    patientId, procedureId and doctorId reference patients, procedures and
    doctors respectively.
    """

    entity_name = "PatientHistory"
    table = "patient_history"
    key_column = "id"
    columns = ("patientId", "procedureId", "date", "billing", "doctorId")

    def _to_params(self, history: PatientHistory) -> Tuple[Any, ...]:
        return (
            history.patient_id,
            history.procedure_id,
            to_canonical(history.date),
            history.billing,
            history.doctor_id,
        )

    def _from_row(self, row: sqlite3.Row) -> PatientHistory:
        return PatientHistory(
            id=row["id"],
            patient_id=int(row["patientId"]),
            procedure_id=row["procedureId"],
            date=parse_canonical(row["date"]),
            billing=float(row["billing"]),
            doctor_id=row["doctorId"],
        )
