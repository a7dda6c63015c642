"""
Repository layer for database access.

This module contains all database access operations, encapsulating SQL and data persistence logic.
"""
from repositories.base import CrudRepository, Database
from repositories.doctor_repository import DoctorRepository
from repositories.patient_history_repository import PatientHistoryRepository
from repositories.patient_repository import PatientRepository
from repositories.procedure_repository import ProcedureRepository

__all__ = [
    "CrudRepository",
    "Database",
    "DoctorRepository",
    "PatientHistoryRepository",
    "PatientRepository",
    "ProcedureRepository",
]
