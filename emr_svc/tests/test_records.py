"""
Tests for doctor, procedure and patient history endpoints.
"""
import pytest

DOCTOR = {"id": "DR-1", "name": "Dr. A"}
PROCEDURE = {
    "id": "P-1",
    "name": "Annual physical",
    "description": "Yearly check-up",
    "duration": 30,
    "doctor_id": "DR-1",
}
HISTORY = {
    "id": "H-1",
    "patient_id": 1001,
    "procedure_id": "P-1",
    "date": "2024-03-15",
    "billing": 150.0,
    "doctor_id": "DR-1",
}


@pytest.fixture
def seeded_api(client):
    """Create DR-1, P-1 and patient 1001 through the API."""
    assert client.post("/api/v1/doctors", json=DOCTOR).status_code == 201
    assert client.post("/api/v1/procedures", json=PROCEDURE).status_code == 201
    patient = {
        "mrn": 1001,
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": "1990-01-01",
        "address": "123 Main St",
        "state": "NY",
        "city": "New York",
        "zip_code": 10001,
        "insurance": "BlueCross",
        "email": "john.doe@example.com",
    }
    assert client.post("/api/v1/patients", json=patient).status_code == 201
    return client


# =============================================================================
# DOCTORS
# =============================================================================

def test_doctor_crud(client):
    assert client.post("/api/v1/doctors", json=DOCTOR).json() == DOCTOR
    assert client.get("/api/v1/doctors/DR-1").json() == DOCTOR

    response = client.put("/api/v1/doctors/DR-1", json={"name": "Dr. Renamed"})
    assert response.status_code == 200
    assert response.json() == {"id": "DR-1", "name": "Dr. Renamed"}

    assert client.delete("/api/v1/doctors/DR-1").status_code == 204
    assert client.get("/api/v1/doctors").json() == []


def test_doctor_blank_name(client):
    response = client.post("/api/v1/doctors", json={"id": "DR-1", "name": " "})
    assert response.status_code == 422
    assert response.json()["context"]["field"] == "name"


def test_doctor_not_found(client):
    assert client.get("/api/v1/doctors/DR-404").status_code == 404
    assert client.put("/api/v1/doctors/DR-404", json={"name": "X"}).status_code == 404
    assert client.delete("/api/v1/doctors/DR-404").status_code == 404


def test_delete_referenced_doctor_conflict(seeded_api):
    response = seeded_api.delete("/api/v1/doctors/DR-1")
    assert response.status_code == 409
    assert seeded_api.get("/api/v1/doctors/DR-1").status_code == 200


# =============================================================================
# PROCEDURES
# =============================================================================

def test_procedure_unknown_doctor(client):
    response = client.post("/api/v1/procedures", json=PROCEDURE)
    assert response.status_code == 404
    data = response.json()
    assert data["context"]["entity_type"] == "Doctor"
    assert data["context"]["reference"] == "doctor_id"
    assert client.get("/api/v1/procedures").json() == []


def test_procedure_negative_duration(client):
    client.post("/api/v1/doctors", json=DOCTOR)
    response = client.post("/api/v1/procedures", json={**PROCEDURE, "duration": -5})
    assert response.status_code == 422
    assert response.json()["context"]["field"] == "duration"


def test_procedure_update(seeded_api):
    body = {k: v for k, v in PROCEDURE.items() if k != "id"}
    body["duration"] = 45

    response = seeded_api.put("/api/v1/procedures/P-1", json=body)
    assert response.status_code == 200
    assert seeded_api.get("/api/v1/procedures/P-1").json()["duration"] == 45


# =============================================================================
# PATIENT HISTORY
# =============================================================================

def test_history_create_and_read(seeded_api):
    response = seeded_api.post("/api/v1/patient-history", json=HISTORY)
    assert response.status_code == 201
    assert response.json() == HISTORY
    assert seeded_api.get("/api/v1/patient-history/H-1").json() == HISTORY


def test_history_unknown_patient(seeded_api):
    response = seeded_api.post("/api/v1/patient-history", json={**HISTORY, "patient_id": 999})
    assert response.status_code == 404
    data = response.json()
    assert data["context"]["entity_type"] == "Patient"
    assert data["context"]["key"] == 999
    assert seeded_api.get("/api/v1/patient-history").json() == []


def test_history_negative_billing(seeded_api):
    response = seeded_api.post("/api/v1/patient-history", json={**HISTORY, "billing": -10})
    assert response.status_code == 422


def test_history_malformed_date(seeded_api):
    response = seeded_api.post("/api/v1/patient-history", json={**HISTORY, "date": "15/03/2024"})
    assert response.status_code == 422


def test_history_update_and_delete(seeded_api):
    seeded_api.post("/api/v1/patient-history", json=HISTORY)
    body = {k: v for k, v in HISTORY.items() if k != "id"}
    body["billing"] = 99.5

    assert seeded_api.put("/api/v1/patient-history/H-1", json=body).json()["billing"] == 99.5
    assert seeded_api.delete("/api/v1/patient-history/H-1").status_code == 204
    assert seeded_api.get("/api/v1/patient-history/H-1").status_code == 404
