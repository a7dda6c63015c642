"""
Pydantic schemas for patient history API operations.
"""
import datetime

from pydantic import BaseModel, ConfigDict, Field

from models import PatientHistory


class PatientHistoryUpdate(BaseModel):
    """Schema for overwriting a patient history record."""

    patient_id: int = Field(..., description="Patient MRN", examples=[1001])
    procedure_id: str = Field(..., description="Procedure ID", examples=["P-1"])
    date: datetime.date = Field(..., description="Date of service (YYYY-MM-DD)", examples=["2024-03-15"])
    billing: float = Field(..., description="Amount billed", examples=[150.0])
    doctor_id: str = Field(..., description="Attending doctor ID", examples=["DR-1"])

    def to_entity(self, history_id: str) -> PatientHistory:
        return PatientHistory(id=history_id, **self.model_dump())


class PatientHistoryCreate(PatientHistoryUpdate):
    """Schema for creating a patient history record."""

    id: str = Field(..., description="History record ID", examples=["H-1"])

    def to_entity(self) -> PatientHistory:
        return PatientHistory(**self.model_dump())


class PatientHistoryResponse(PatientHistoryCreate):
    """Schema for patient history response."""

    model_config = ConfigDict(from_attributes=True)
