"""
Repository for doctor database operations.

All SQL lives in the CrudRepository base; this module only describes the
doctors table.
"""
import sqlite3
from typing import Any, Tuple

from models import Doctor
from repositories.base import CrudRepository


class DoctorRepository(CrudRepository[Doctor, str]):
    """Repository for doctor CRUD operations."""

    entity_name = "Doctor"
    table = "doctors"
    key_column = "id"
    columns = ("name",)

    def _to_params(self, doctor: Doctor) -> Tuple[Any, ...]:
        return (doctor.name,)

    def _from_row(self, row: sqlite3.Row) -> Doctor:
        return Doctor(id=row["id"], name=row["name"])
