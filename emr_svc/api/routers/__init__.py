"""
API routers module.

This module contains all API route definitions organized by domain.
"""
from api.routers.doctors import router as doctors_router
from api.routers.health import router as health_router
from api.routers.patient_history import router as patient_history_router
from api.routers.patients import router as patients_router
from api.routers.procedures import router as procedures_router

__all__ = [
    "doctors_router",
    "health_router",
    "patient_history_router",
    "patients_router",
    "procedures_router",
]
