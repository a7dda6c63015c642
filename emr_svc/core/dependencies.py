"""
FastAPI Dependency Injection configuration for the EMR service.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends()
    Service Layer (validation, reference checks, error translation)
         ↓ Injected
    Repository Layer (CrudRepository per entity)
         ↓ Injected
    Database (one SQLite connection)

Usage in Routers:
    from core.dependencies import get_patient_service

    @router.get("/{mrn}")
    async def read_patient(mrn: int, service: PatientService = Depends(get_patient_service)):
        return service.get(mrn)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_database] = lambda: test_database
"""
import logging
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE DEPENDENCY
# =============================================================================

# Lazy import to avoid circular dependencies
_database_instance: Optional["Database"] = None


def get_database() -> "Database":
    """
    Get the shared database provider, opening it on first use.

    Returns:
        Database: The open connection provider.

    Raises:
        DatabaseConnectionError: If the database cannot be opened.
    """
    global _database_instance

    if _database_instance is None:
        from repositories.base import Database

        logger.info(f"Initializing database: {settings.database_path}")
        database = Database(
            db_path=settings.database_path,
            user=settings.emr_db_user,
            password=settings.emr_db_password,
        )
        database.open()
        _database_instance = database

    return _database_instance


def reset_database() -> None:
    """
    Close and forget the shared database provider.

    Called on application shutdown and by tests that need a fresh instance.
    """
    global _database_instance
    if _database_instance is not None:
        _database_instance.close()
    _database_instance = None


# =============================================================================
# REPOSITORY DEPENDENCIES
# =============================================================================

def get_patient_repository() -> "PatientRepository":
    """Get a PatientRepository with the database and date policy injected."""
    from repositories import PatientRepository

    return PatientRepository(db=get_database(), ambiguous_dates=settings.emr_ambiguous_dates)


def get_doctor_repository() -> "DoctorRepository":
    """Get a DoctorRepository with the database injected."""
    from repositories import DoctorRepository

    return DoctorRepository(db=get_database())


def get_procedure_repository() -> "ProcedureRepository":
    """Get a ProcedureRepository with the database injected."""
    from repositories import ProcedureRepository

    return ProcedureRepository(db=get_database())


def get_patient_history_repository() -> "PatientHistoryRepository":
    """Get a PatientHistoryRepository with the database injected."""
    from repositories import PatientHistoryRepository

    return PatientHistoryRepository(db=get_database())


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

def get_patient_service() -> "PatientService":
    """
    Get a PatientService instance with repository injected.

    Returns:
        PatientService: Service for patient operations.
    """
    from services import PatientService

    return PatientService(patient_repository=get_patient_repository())


def get_doctor_service() -> "DoctorService":
    """Get a DoctorService instance with repository injected."""
    from services import DoctorService

    return DoctorService(doctor_repository=get_doctor_repository())


def get_procedure_service() -> "ProcedureService":
    """
    Get a ProcedureService instance.

    The doctor repository is injected alongside the procedure repository for
    the doctor reference check.
    """
    from services import ProcedureService

    return ProcedureService(
        procedure_repository=get_procedure_repository(),
        doctor_repository=get_doctor_repository(),
    )


def get_patient_history_service() -> "PatientHistoryService":
    """
    Get a PatientHistoryService instance.

    Patient, procedure and doctor repositories are injected for the
    reference checks made before every write.
    """
    from services import PatientHistoryService

    return PatientHistoryService(
        history_repository=get_patient_history_repository(),
        patient_repository=get_patient_repository(),
        procedure_repository=get_procedure_repository(),
        doctor_repository=get_doctor_repository(),
    )
