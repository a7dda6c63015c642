"""
Pydantic schemas for procedure-related API operations.
"""
from pydantic import BaseModel, ConfigDict, Field

from models import Procedure


class ProcedureUpdate(BaseModel):
    """Schema for overwriting a procedure."""

    name: str = Field(..., description="Procedure name", examples=["Annual physical"])
    description: str = Field("", description="Free-text description")
    duration: int = Field(..., description="Duration in minutes", examples=[30])
    doctor_id: str = Field(..., description="ID of the performing doctor", examples=["DR-1"])

    def to_entity(self, procedure_id: str) -> Procedure:
        return Procedure(id=procedure_id, **self.model_dump())


class ProcedureCreate(ProcedureUpdate):
    """Schema for creating a procedure."""

    id: str = Field(..., description="Procedure ID", examples=["P-1"])

    def to_entity(self) -> Procedure:
        return Procedure(**self.model_dump())


class ProcedureResponse(ProcedureCreate):
    """Schema for procedure response."""

    model_config = ConfigDict(from_attributes=True)
