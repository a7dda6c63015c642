"""
Tests for patient endpoints.
"""
PATIENT = {
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


def _update_body(**overrides):
    body = {k: v for k, v in PATIENT.items() if k != "mrn"}
    body.update(overrides)
    return body


# Patient Endpoint Tests
def test_create_patient_success(client):
    """Test successful patient creation."""
    response = client.post("/api/v1/patients", json=PATIENT)
    assert response.status_code == 201
    assert response.json() == PATIENT


def test_create_patient_duplicate(client):
    """Test creating a patient with a taken MRN returns 409."""
    response1 = client.post("/api/v1/patients", json=PATIENT)
    assert response1.status_code == 201

    response2 = client.post("/api/v1/patients", json={**PATIENT, "first_name": "Jane"})
    assert response2.status_code == 409
    data = response2.json()
    assert data["error"] == "ConstraintViolationError"
    assert "unique" in data["detail"].lower()

    # Original row untouched
    assert client.get("/api/v1/patients/1001").json()["first_name"] == "John"


def test_create_patient_validation_empty_name(client):
    """Test patient creation with empty first name fails validation."""
    response = client.post("/api/v1/patients", json={**PATIENT, "first_name": ""})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "ValidationError"
    assert data["context"]["field"] == "first_name"


def test_create_patient_validation_missing_field(client):
    """Test patient creation without a required field fails validation."""
    body = {k: v for k, v in PATIENT.items() if k != "email"}
    response = client.post("/api/v1/patients", json=body)
    assert response.status_code == 422


def test_create_patient_future_birth_date(client):
    response = client.post("/api/v1/patients", json={**PATIENT, "date_of_birth": "2999-01-01"})
    assert response.status_code == 422
    assert response.json()["context"]["field"] == "date_of_birth"


def test_get_patients_empty(client):
    """Test getting patients when database is empty."""
    response = client.get("/api/v1/patients")
    assert response.status_code == 200
    assert response.json() == []


def test_get_patients_multiple(client):
    client.post("/api/v1/patients", json=PATIENT)
    client.post("/api/v1/patients", json={**PATIENT, "mrn": 1002, "first_name": "Alice"})

    response = client.get("/api/v1/patients")
    assert response.status_code == 200
    assert sorted(p["mrn"] for p in response.json()) == [1001, 1002]


def test_get_patient_not_found(client):
    response = client.get("/api/v1/patients/999")
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "EntityNotFoundError"
    assert data["context"] == {"entity_type": "Patient", "key": 999}


def test_update_patient(client):
    client.post("/api/v1/patients", json=PATIENT)

    response = client.put("/api/v1/patients/1001", json=_update_body(city="Albany"))
    assert response.status_code == 200
    assert response.json()["city"] == "Albany"
    assert client.get("/api/v1/patients/1001").json()["city"] == "Albany"


def test_update_patient_not_found(client):
    response = client.put("/api/v1/patients/999", json=_update_body())
    assert response.status_code == 404
    assert client.get("/api/v1/patients").json() == []


def test_delete_patient(client):
    client.post("/api/v1/patients", json=PATIENT)

    response = client.delete("/api/v1/patients/1001")
    assert response.status_code == 204
    assert client.get("/api/v1/patients/1001").status_code == 404
    assert client.delete("/api/v1/patients/1001").status_code == 404


def test_ambiguous_dates_endpoint(client, temp_db):
    client.post("/api/v1/patients", json=PATIENT)
    with temp_db.cursor("seed raw patient") as cur:
        cur.execute(
            "INSERT INTO patients (mrn, fname, lname, dob, address, state, city, zip, insurance, email) "
            "VALUES (2002, 'Jane', 'Roe', '03/04/2020', '1 Elm St', 'MA', 'Boston', 2101, 'Aetna', 'j@e.com')"
        )

    response = client.get("/api/v1/patients/ambiguous-dates")
    assert response.status_code == 200
    assert response.json() == [{"mrn": 2002, "stored_value": "03/04/2020"}]

    # Read day-first, and saving repairs the stored value
    patient = client.get("/api/v1/patients/2002").json()
    assert patient["date_of_birth"] == "2020-04-03"
    body = {k: v for k, v in patient.items() if k != "mrn"}
    assert client.put("/api/v1/patients/2002", json=body).status_code == 200
    assert client.get("/api/v1/patients/ambiguous-dates").json() == []


def test_oversized_mrn(client):
    response = client.post("/api/v1/patients", json={**PATIENT, "mrn": 2 ** 70})
    assert response.status_code == 422
    assert response.json()["context"]["field"] == "mrn"

    response = client.get(f"/api/v1/patients/{2 ** 70}")
    assert response.status_code == 500
    assert response.json()["error"] == "DatabaseError"


def test_early_birth_date_round_trip(client):
    client.post("/api/v1/patients", json={**PATIENT, "date_of_birth": "0999-05-17"})
    assert client.get("/api/v1/patients/1001").json()["date_of_birth"] == "0999-05-17"
