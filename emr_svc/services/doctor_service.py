"""
Service layer for doctor operations.
"""
from models import Doctor
from repositories import DoctorRepository
from services.base import EntityService
from services.validators import validate_required_text


class DoctorService(EntityService[Doctor, str]):
    """Doctor management: both fields are required text."""

    entity_name = "Doctor"

    def __init__(self, doctor_repository: DoctorRepository):
        super().__init__(doctor_repository)

    def validate(self, doctor: Doctor) -> None:
        validate_required_text(doctor.id, "id")
        validate_required_text(doctor.name, "name")
