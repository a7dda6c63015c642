"""
Service layer for patient operations.

Architecture:
    API Layer (routers) → PatientService → PatientRepository → Database

Dependency Injection:
    PatientService receives its repository via constructor injection.
    Use core.dependencies.get_patient_service() in routers with Depends().
"""
import logging
from typing import List, Tuple

from models import Patient
from repositories import PatientRepository
from services.base import EntityService
from services.validators import (
    validate_date,
    validate_email,
    validate_integer,
    validate_non_negative,
    validate_not_future,
    validate_positive,
    validate_required_text,
)

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("first_name", "last_name", "address", "state", "city", "insurance")


class PatientService(EntityService[Patient, int]):
    """
    Service layer for patient operations.

    The MRN is caller-assigned and must be positive; updates are keyed by it,
    so it cannot change once a patient is stored.
    """

    entity_name = "Patient"

    def __init__(self, patient_repository: PatientRepository):
        """
        Initialize the patient service.

        Args:
            patient_repository: PatientRepository instance for data access.
                               Injected via core.dependencies.get_patient_service().
        """
        super().__init__(patient_repository)

    def validate(self, patient: Patient) -> None:
        validate_integer(patient.mrn, "mrn")
        validate_positive(patient.mrn, "mrn")
        for field in REQUIRED_TEXT_FIELDS:
            validate_required_text(getattr(patient, field), field)
        validate_date(patient.date_of_birth, "date_of_birth")
        validate_not_future(patient.date_of_birth, "date_of_birth")
        validate_integer(patient.zip_code, "zip_code")
        validate_non_negative(patient.zip_code, "zip_code")
        validate_email(patient.email, "email")

    def list_ambiguous_dates(self) -> List[Tuple[int, str]]:
        """
        List patients whose stored date of birth could be MM/DD or DD/MM.

        These rows are read using the configured policy; staff should confirm
        the date and save the patient, which rewrites it canonically.
        """
        with self._storage_errors("scan dates"):
            flagged = self._repo.find_ambiguous_dates()
        if flagged:
            logger.warning(f"{len(flagged)} patient(s) have ambiguous dates of birth")
        return flagged
