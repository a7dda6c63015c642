"""
Pydantic schemas for API request/response validation.

This module contains all Pydantic models used at API boundaries.
"""
from schemas.doctor import DoctorCreate, DoctorResponse, DoctorUpdate
from schemas.patient import (
    AmbiguousDateResponse,
    PatientCreate,
    PatientResponse,
    PatientUpdate,
)
from schemas.patient_history import (
    PatientHistoryCreate,
    PatientHistoryResponse,
    PatientHistoryUpdate,
)
from schemas.procedure import ProcedureCreate, ProcedureResponse, ProcedureUpdate

__all__ = [
    # Patient schemas
    "AmbiguousDateResponse",
    "PatientCreate",
    "PatientResponse",
    "PatientUpdate",
    # Doctor schemas
    "DoctorCreate",
    "DoctorResponse",
    "DoctorUpdate",
    # Procedure schemas
    "ProcedureCreate",
    "ProcedureResponse",
    "ProcedureUpdate",
    # Patient history schemas
    "PatientHistoryCreate",
    "PatientHistoryResponse",
    "PatientHistoryUpdate",
]
