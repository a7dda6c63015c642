"""
Shared pytest fixtures.

Key patterns:

1. Database Isolation: Each test gets a fresh temporary SQLite file
2. DI Override: Use app.dependency_overrides to inject test dependencies
3. Service Injection: Services are created with test repositories

Fixture Hierarchy:
    temp_db → repositories → services → test_app → client
"""
import os
import tempfile
from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core import dependencies as deps
from core.exceptions import setup_exception_handlers
from models import Doctor, Patient, PatientHistory, Procedure
from repositories import (
    Database,
    DoctorRepository,
    PatientHistoryRepository,
    PatientRepository,
    ProcedureRepository,
)
from services import (
    DoctorService,
    PatientHistoryService,
    PatientService,
    ProcedureService,
)


@pytest.fixture
def temp_db():
    """
    Create an open database backed by a temporary file.

    The connection is closed and the file removed after the test.
    """
    fd, db_path = tempfile.mkstemp(suffix='.db')
    os.close(fd)

    db = Database(db_path=db_path)
    db.open()
    yield db

    # Cleanup
    db.close()
    if os.path.exists(db_path):
        os.unlink(db_path)


# =============================================================================
# REPOSITORIES
# =============================================================================

@pytest.fixture
def patient_repo(temp_db):
    """Create a PatientRepository with the test database."""
    return PatientRepository(db=temp_db, ambiguous_dates="day_first")


@pytest.fixture
def doctor_repo(temp_db):
    """Create a DoctorRepository with the test database."""
    return DoctorRepository(db=temp_db)


@pytest.fixture
def procedure_repo(temp_db):
    """Create a ProcedureRepository with the test database."""
    return ProcedureRepository(db=temp_db)


@pytest.fixture
def history_repo(temp_db):
    """Create a PatientHistoryRepository with the test database."""
    return PatientHistoryRepository(db=temp_db)


# =============================================================================
# SERVICES
# =============================================================================

@pytest.fixture
def patient_service(patient_repo):
    return PatientService(patient_repository=patient_repo)


@pytest.fixture
def doctor_service(doctor_repo):
    return DoctorService(doctor_repository=doctor_repo)


@pytest.fixture
def procedure_service(procedure_repo, doctor_repo):
    return ProcedureService(procedure_repository=procedure_repo, doctor_repository=doctor_repo)


@pytest.fixture
def history_service(history_repo, patient_repo, procedure_repo, doctor_repo):
    return PatientHistoryService(
        history_repository=history_repo,
        patient_repository=patient_repo,
        procedure_repository=procedure_repo,
        doctor_repository=doctor_repo,
    )


# =============================================================================
# SAMPLE ENTITIES
# =============================================================================

@pytest.fixture
def make_patient():
    """Factory for valid patients; keyword arguments override fields."""
    def _make(**overrides):
        fields = dict(
            mrn=1001,
            first_name="John",
            last_name="Doe",
            date_of_birth=date(1990, 1, 1),
            address="123 Main St",
            state="NY",
            city="New York",
            zip_code=10001,
            insurance="BlueCross",
            email="john.doe@example.com",
        )
        fields.update(overrides)
        return Patient(**fields)
    return _make


@pytest.fixture
def make_doctor():
    def _make(**overrides):
        fields = dict(id="DR-1", name="Dr. A")
        fields.update(overrides)
        return Doctor(**fields)
    return _make


@pytest.fixture
def make_procedure():
    def _make(**overrides):
        fields = dict(
            id="P-1",
            name="Annual physical",
            description="Yearly check-up",
            duration=30,
            doctor_id="DR-1",
        )
        fields.update(overrides)
        return Procedure(**fields)
    return _make


@pytest.fixture
def make_history():
    def _make(**overrides):
        fields = dict(
            id="H-1",
            patient_id=1001,
            procedure_id="P-1",
            date=date(2024, 3, 15),
            billing=150.0,
            doctor_id="DR-1",
        )
        fields.update(overrides)
        return PatientHistory(**fields)
    return _make


@pytest.fixture
def seeded(doctor_repo, procedure_repo, patient_repo, make_doctor, make_procedure, make_patient):
    """Store one doctor (DR-1), one procedure (P-1) and one patient (1001)."""
    doctor_repo.create(make_doctor())
    procedure_repo.create(make_procedure())
    patient_repo.create(make_patient())


# =============================================================================
# API
# =============================================================================

@pytest.fixture
def test_app(temp_db, patient_repo, doctor_repo, procedure_repo, history_repo,
             patient_service, doctor_service, procedure_service, history_service):
    """
    Create a FastAPI test app with dependency overrides.

    Uses the real routers and exception handlers with test instances injected
    via dependency_overrides.
    """
    from api.routers import (
        doctors_router,
        health_router,
        patient_history_router,
        patients_router,
        procedures_router,
    )

    app = FastAPI(title="EMR Service API Test")
    setup_exception_handlers(app)

    app.dependency_overrides[deps.get_database] = lambda: temp_db
    app.dependency_overrides[deps.get_patient_repository] = lambda: patient_repo
    app.dependency_overrides[deps.get_doctor_repository] = lambda: doctor_repo
    app.dependency_overrides[deps.get_procedure_repository] = lambda: procedure_repo
    app.dependency_overrides[deps.get_patient_history_repository] = lambda: history_repo
    app.dependency_overrides[deps.get_patient_service] = lambda: patient_service
    app.dependency_overrides[deps.get_doctor_service] = lambda: doctor_service
    app.dependency_overrides[deps.get_procedure_service] = lambda: procedure_service
    app.dependency_overrides[deps.get_patient_history_service] = lambda: history_service

    app.include_router(health_router)
    app.include_router(patients_router)
    app.include_router(doctors_router)
    app.include_router(procedures_router)
    app.include_router(patient_history_router)

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client for the API."""
    return TestClient(test_app)
