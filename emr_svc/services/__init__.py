"""
Service layer for business logic.

Each service validates input, checks referenced entities and translates
repository results into the exceptions in core.exceptions.
"""
from services.base import EntityService
from services.doctor_service import DoctorService
from services.patient_history_service import PatientHistoryService
from services.patient_service import PatientService
from services.procedure_service import ProcedureService

__all__ = [
    "EntityService",
    "DoctorService",
    "PatientHistoryService",
    "PatientService",
    "ProcedureService",
]
