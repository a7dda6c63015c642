"""
Patients router - patient management endpoints.

Architecture:
    HTTP Request → Router (this file) → PatientService → PatientRepository → Database

Dependency Injection:
    Services are injected via FastAPI's Depends() mechanism.
    The DI chain is defined in core/dependencies.py.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from schemas import AmbiguousDateResponse, PatientCreate, PatientResponse, PatientUpdate
from services import PatientService
from core.dependencies import get_patient_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/patients",
    tags=["Patients"],
)


# =============================================================================
# ENDPOINTS
# =============================================================================
# Service errors (ValidationError, EntityNotFoundError, DatabaseError) are
# turned into JSON responses by setup_exception_handlers().

@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new patient",
    description="Add a patient under a caller-assigned MRN. Returns 409 if the MRN is taken."
)
async def create_patient(
    patient: PatientCreate,
    patient_service: PatientService = Depends(get_patient_service)
):
    created = patient_service.create(patient.to_entity())
    return PatientResponse.model_validate(created)


@router.get(
    "",
    response_model=List[PatientResponse],
    summary="List all patients"
)
async def list_patients(patient_service: PatientService = Depends(get_patient_service)):
    return [PatientResponse.model_validate(p) for p in patient_service.get_all()]


@router.get(
    "/ambiguous-dates",
    response_model=List[AmbiguousDateResponse],
    summary="List patients with ambiguous stored dates of birth",
    description="Dates such as 03/04/2020 that read differently as MM/DD and DD/MM. "
                "Saving the patient rewrites the date as YYYY-MM-DD."
)
async def list_ambiguous_dates(patient_service: PatientService = Depends(get_patient_service)):
    return [
        AmbiguousDateResponse(mrn=mrn, stored_value=raw)
        for mrn, raw in patient_service.list_ambiguous_dates()
    ]


@router.get(
    "/{mrn}",
    response_model=PatientResponse,
    summary="Get a patient by MRN"
)
async def read_patient(mrn: int, patient_service: PatientService = Depends(get_patient_service)):
    return PatientResponse.model_validate(patient_service.get(mrn))


@router.put(
    "/{mrn}",
    response_model=PatientResponse,
    summary="Overwrite a patient",
    description="Full-row update: every field is replaced. The MRN cannot change."
)
async def update_patient(
    mrn: int,
    patient: PatientUpdate,
    patient_service: PatientService = Depends(get_patient_service)
):
    updated = patient_service.update(patient.to_entity(mrn))
    return PatientResponse.model_validate(updated)


@router.delete(
    "/{mrn}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a patient"
)
async def delete_patient(mrn: int, patient_service: PatientService = Depends(get_patient_service)):
    patient_service.delete(mrn)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
