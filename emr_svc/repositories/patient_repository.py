"""
Repository for patient database operations.

Architecture:
    PatientRepository is the data access layer for patients.
    It should be injected via core.dependencies.get_patient_repository().

Dates of birth are read tolerantly (canonical, US, then legacy encoding; see
core.dates) and always written back as YYYY-MM-DD, so old rows are repaired
one at a time as they are updated.
"""
import logging
import sqlite3
from typing import Any, List, Optional, Tuple

from core.config import AMBIGUOUS_DATE_POLICY
from core.dates import is_ambiguous, parse_stored_date, to_canonical
from models import Patient
from repositories.base import CrudRepository, Database

logger = logging.getLogger(__name__)


class PatientRepository(CrudRepository[Patient, int]):
    """
    Repository for patient CRUD operations.

    It should be instantiated via core.dependencies.get_patient_repository().
    """

    entity_name = "Patient"
    table = "patients"
    key_column = "mrn"
    columns = ("fname", "lname", "dob", "address", "state", "city", "zip", "insurance", "email")

    def __init__(self, db: Database, ambiguous_dates: Optional[str] = None):
        """
        Initialize the patient repository.

        Args:
            db: Database instance for data access.
            ambiguous_dates: Policy for dates of birth readable as both MM/DD
                and DD/MM ("day_first", "month_first" or "reject").
                Defaults to the EMR_AMBIGUOUS_DATES setting.
        """
        super().__init__(db)
        self._ambiguous_dates = ambiguous_dates or AMBIGUOUS_DATE_POLICY

    def _to_params(self, patient: Patient) -> Tuple[Any, ...]:
        return (
            patient.first_name,
            patient.last_name,
            to_canonical(patient.date_of_birth),
            patient.address,
            patient.state,
            patient.city,
            patient.zip_code,
            patient.insurance,
            patient.email,
        )

    def _from_row(self, row: sqlite3.Row) -> Patient:
        decoded = parse_stored_date(row["dob"], self._ambiguous_dates)
        if not decoded.is_canonical:
            logger.info(
                f"Patient {row['mrn']} has a {decoded.encoding} date of birth; "
                "it will be rewritten canonically on next update"
            )
        return Patient(
            mrn=int(row["mrn"]),
            first_name=row["fname"],
            last_name=row["lname"],
            date_of_birth=decoded.value,
            address=row["address"],
            state=row["state"],
            city=row["city"],
            zip_code=int(row["zip"]),
            insurance=row["insurance"],
            email=row["email"],
        )

    def find_ambiguous_dates(self) -> List[Tuple[int, str]]:
        """
        List patients whose stored date of birth is ambiguous.

        Returns:
            List of (mrn, raw stored value) pairs, ordered by MRN.
        """
        with self._db.cursor("scan Patient dates") as cur:
            cur.execute("SELECT mrn, dob FROM patients WHERE dob LIKE '%/%' ORDER BY mrn")
            rows = cur.fetchall()

        return [(int(row["mrn"]), row["dob"]) for row in rows if is_ambiguous(row["dob"])]
