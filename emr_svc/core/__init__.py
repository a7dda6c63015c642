"""
Core module for application configuration, logging, and shared utilities.

This module provides:
- Settings: Application configuration via pydantic-settings
- Dependency injection: FastAPI Depends() functions for services and repositories
- Exceptions: The domain error taxonomy with HTTP status codes
- Dates: Tolerant decoding of stored dates and canonical encoding
"""
from core.config import settings, Settings

from core.dependencies import (
    get_database,
    get_doctor_repository,
    get_doctor_service,
    get_patient_history_repository,
    get_patient_history_service,
    get_patient_repository,
    get_patient_service,
    get_procedure_repository,
    get_procedure_service,
    reset_database,
)

from core.exceptions import (
    EMRServiceError,
    ValidationError,
    EntityNotFoundError,
    DatabaseError,
    ConstraintViolationError,
    DatabaseConnectionError,
    setup_exception_handlers,
)

from core.dates import (
    DateDecodeError,
    DecodedDate,
    parse_stored_date,
    parse_canonical,
    to_canonical,
)

__all__ = [
    # Config
    "settings",
    "Settings",
    # Dependencies
    "get_database",
    "get_doctor_repository",
    "get_doctor_service",
    "get_patient_history_repository",
    "get_patient_history_service",
    "get_patient_repository",
    "get_patient_service",
    "get_procedure_repository",
    "get_procedure_service",
    "reset_database",
    # Exceptions
    "EMRServiceError",
    "ValidationError",
    "EntityNotFoundError",
    "DatabaseError",
    "ConstraintViolationError",
    "DatabaseConnectionError",
    "setup_exception_handlers",
    # Dates
    "DateDecodeError",
    "DecodedDate",
    "parse_stored_date",
    "parse_canonical",
    "to_canonical",
]
