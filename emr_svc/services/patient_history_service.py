"""
Service layer for patient history operations.

A history record ties a patient, a procedure and a doctor together, so every
write first confirms all three exist. Nothing is written if any is missing.
"""
from models import PatientHistory
from repositories import (
    DoctorRepository,
    PatientHistoryRepository,
    PatientRepository,
    ProcedureRepository,
)
from services.base import EntityService
from services.validators import (
    validate_date,
    validate_integer,
    validate_non_negative,
    validate_positive,
    validate_required_text,
)


class PatientHistoryService(EntityService[PatientHistory, str]):
    """
    Service layer for patient history operations.

    Dependency Injection:
        Receives the history repository plus the patient, procedure and doctor
        repositories used for reference checks.
    """

    entity_name = "PatientHistory"

    def __init__(
        self,
        history_repository: PatientHistoryRepository,
        patient_repository: PatientRepository,
        procedure_repository: ProcedureRepository,
        doctor_repository: DoctorRepository,
    ):
        super().__init__(history_repository)
        self._patient_repo = patient_repository
        self._procedure_repo = procedure_repository
        self._doctor_repo = doctor_repository

    def validate(self, history: PatientHistory) -> None:
        validate_required_text(history.id, "id")
        validate_integer(history.patient_id, "patient_id")
        validate_positive(history.patient_id, "patient_id")
        validate_required_text(history.procedure_id, "procedure_id")
        validate_date(history.date, "date")
        validate_non_negative(history.billing, "billing")
        validate_required_text(history.doctor_id, "doctor_id")

    def check_references(self, history: PatientHistory) -> None:
        self._require(self._patient_repo, "Patient", history.patient_id, "patient_id")
        self._require(self._procedure_repo, "Procedure", history.procedure_id, "procedure_id")
        self._require(self._doctor_repo, "Doctor", history.doctor_id, "doctor_id")
