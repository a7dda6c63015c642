"""
Procedures router - procedure management endpoints.

Creating or updating a procedure returns 404 if the named doctor does not exist.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from schemas import ProcedureCreate, ProcedureResponse, ProcedureUpdate
from services import ProcedureService
from core.dependencies import get_procedure_service

router = APIRouter(
    prefix="/api/v1/procedures",
    tags=["Procedures"],
)


@router.post(
    "",
    response_model=ProcedureResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new procedure"
)
async def create_procedure(
    procedure: ProcedureCreate,
    procedure_service: ProcedureService = Depends(get_procedure_service)
):
    return ProcedureResponse.model_validate(procedure_service.create(procedure.to_entity()))


@router.get("", response_model=List[ProcedureResponse], summary="List all procedures")
async def list_procedures(procedure_service: ProcedureService = Depends(get_procedure_service)):
    return [ProcedureResponse.model_validate(p) for p in procedure_service.get_all()]


@router.get("/{procedure_id}", response_model=ProcedureResponse, summary="Get a procedure by ID")
async def read_procedure(
    procedure_id: str,
    procedure_service: ProcedureService = Depends(get_procedure_service)
):
    return ProcedureResponse.model_validate(procedure_service.get(procedure_id))


@router.put("/{procedure_id}", response_model=ProcedureResponse, summary="Overwrite a procedure")
async def update_procedure(
    procedure_id: str,
    procedure: ProcedureUpdate,
    procedure_service: ProcedureService = Depends(get_procedure_service)
):
    updated = procedure_service.update(procedure.to_entity(procedure_id))
    return ProcedureResponse.model_validate(updated)


@router.delete("/{procedure_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a procedure")
async def delete_procedure(
    procedure_id: str,
    procedure_service: ProcedureService = Depends(get_procedure_service)
):
    procedure_service.delete(procedure_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
