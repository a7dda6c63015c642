"""
Repository for procedure database operations.
"""
import sqlite3
from typing import Any, Tuple

from models import Procedure
from repositories.base import CrudRepository


class ProcedureRepository(CrudRepository[Procedure, str]):
    """
    Repository for procedure CRUD operations.

    The doctorId column references doctors(id); SQLite rejects writes naming
    an unknown doctor with a ConstraintViolationError.
    """

    entity_name = "Procedure"
    table = "procedures"
    key_column = "id"
    columns = ("name", "description", "duration", "doctorId")

    def _to_params(self, procedure: Procedure) -> Tuple[Any, ...]:
        return (
            procedure.name,
            procedure.description,
            procedure.duration,
            procedure.doctor_id,
        )

    def _from_row(self, row: sqlite3.Row) -> Procedure:
        return Procedure(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            duration=int(row["duration"]),
            doctor_id=row["doctorId"],
        )
