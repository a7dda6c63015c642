"""
Service layer for procedure operations.

A procedure can only be stored against a doctor that already exists.
"""
from models import Procedure
from repositories import DoctorRepository, ProcedureRepository
from services.base import EntityService
from services.validators import (
    validate_integer,
    validate_non_negative,
    validate_required_text,
    validate_text,
)


class ProcedureService(EntityService[Procedure, str]):
    """
    Service layer for procedure operations.

    Dependency Injection:
        Receives its own repository and the doctor repository used for the
        doctor reference check.
    """

    entity_name = "Procedure"

    def __init__(self, procedure_repository: ProcedureRepository, doctor_repository: DoctorRepository):
        super().__init__(procedure_repository)
        self._doctor_repo = doctor_repository

    def validate(self, procedure: Procedure) -> None:
        validate_required_text(procedure.id, "id")
        validate_required_text(procedure.name, "name")
        # Free text, may be empty
        validate_text(procedure.description, "description")
        validate_integer(procedure.duration, "duration")
        validate_non_negative(procedure.duration, "duration")
        validate_required_text(procedure.doctor_id, "doctor_id")

    def check_references(self, procedure: Procedure) -> None:
        self._require(self._doctor_repo, "Doctor", procedure.doctor_id, "doctor_id")
