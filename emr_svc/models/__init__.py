"""
Domain models for the EMR service.

Plain dataclasses handed between repositories, services and the API layer.
"""
from models.doctor import Doctor
from models.patient import Patient
from models.patient_history import PatientHistory
from models.procedure import Procedure

__all__ = ["Doctor", "Patient", "PatientHistory", "Procedure"]
