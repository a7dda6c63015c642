"""
Doctors router - doctor management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from schemas import DoctorCreate, DoctorResponse, DoctorUpdate
from services import DoctorService
from core.dependencies import get_doctor_service

router = APIRouter(
    prefix="/api/v1/doctors",
    tags=["Doctors"],
)


@router.post(
    "",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new doctor"
)
async def create_doctor(
    doctor: DoctorCreate,
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return DoctorResponse.model_validate(doctor_service.create(doctor.to_entity()))


@router.get("", response_model=List[DoctorResponse], summary="List all doctors")
async def list_doctors(doctor_service: DoctorService = Depends(get_doctor_service)):
    return [DoctorResponse.model_validate(d) for d in doctor_service.get_all()]


@router.get("/{doctor_id}", response_model=DoctorResponse, summary="Get a doctor by ID")
async def read_doctor(doctor_id: str, doctor_service: DoctorService = Depends(get_doctor_service)):
    return DoctorResponse.model_validate(doctor_service.get(doctor_id))


@router.put("/{doctor_id}", response_model=DoctorResponse, summary="Overwrite a doctor")
async def update_doctor(
    doctor_id: str,
    doctor: DoctorUpdate,
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return DoctorResponse.model_validate(doctor_service.update(doctor.to_entity(doctor_id)))


@router.delete(
    "/{doctor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a doctor",
    description="Returns 409 while procedures or history records still reference the doctor."
)
async def delete_doctor(doctor_id: str, doctor_service: DoctorService = Depends(get_doctor_service)):
    doctor_service.delete(doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
