"""
Patient history router - procedure events with billing.

Writes return 404 naming the missing reference when the patient, procedure or
doctor does not exist; nothing is stored in that case.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from schemas import PatientHistoryCreate, PatientHistoryResponse, PatientHistoryUpdate
from services import PatientHistoryService
from core.dependencies import get_patient_history_service

router = APIRouter(
    prefix="/api/v1/patient-history",
    tags=["Patient History"],
)


@router.post(
    "",
    response_model=PatientHistoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a procedure performed on a patient"
)
async def create_history(
    history: PatientHistoryCreate,
    history_service: PatientHistoryService = Depends(get_patient_history_service)
):
    return PatientHistoryResponse.model_validate(history_service.create(history.to_entity()))


@router.get("", response_model=List[PatientHistoryResponse], summary="List all history records")
async def list_history(history_service: PatientHistoryService = Depends(get_patient_history_service)):
    return [PatientHistoryResponse.model_validate(h) for h in history_service.get_all()]


@router.get("/{history_id}", response_model=PatientHistoryResponse, summary="Get a history record by ID")
async def read_history(
    history_id: str,
    history_service: PatientHistoryService = Depends(get_patient_history_service)
):
    return PatientHistoryResponse.model_validate(history_service.get(history_id))


@router.put("/{history_id}", response_model=PatientHistoryResponse, summary="Overwrite a history record")
async def update_history(
    history_id: str,
    history: PatientHistoryUpdate,
    history_service: PatientHistoryService = Depends(get_patient_history_service)
):
    updated = history_service.update(history.to_entity(history_id))
    return PatientHistoryResponse.model_validate(updated)


@router.delete("/{history_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a history record")
async def delete_history(
    history_id: str,
    history_service: PatientHistoryService = Depends(get_patient_history_service)
):
    history_service.delete(history_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
