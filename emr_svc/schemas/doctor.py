"""
Pydantic schemas for doctor-related API operations.
"""
from pydantic import BaseModel, ConfigDict, Field

from models import Doctor


class DoctorUpdate(BaseModel):
    """Schema for overwriting a doctor."""

    name: str = Field(..., description="Doctor full name", examples=["Dr. Alice Smith"])

    def to_entity(self, doctor_id: str) -> Doctor:
        return Doctor(id=doctor_id, name=self.name)


class DoctorCreate(DoctorUpdate):
    """Schema for creating a doctor. IDs conventionally start with "DR-"."""

    id: str = Field(..., description="Doctor ID", examples=["DR-1"])

    def to_entity(self) -> Doctor:
        return Doctor(id=self.id, name=self.name)


class DoctorResponse(DoctorCreate):
    """Schema for doctor response."""

    model_config = ConfigDict(from_attributes=True)
