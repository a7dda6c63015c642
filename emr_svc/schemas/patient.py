"""
Pydantic schemas for patient-related API operations.

Schemas only check types; field rules (non-blank text, positive MRN, ...) are
enforced by PatientService so every caller gets the same rules.
"""
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from models import Patient


class PatientUpdate(BaseModel):
    """Schema for overwriting a patient. Every field is required (full-row update)."""

    first_name: str = Field(..., description="Patient first name", examples=["John"])
    last_name: str = Field(..., description="Patient last name", examples=["Doe"])
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)", examples=["1990-01-01"])
    address: str = Field(..., description="Street address", examples=["123 Main St"])
    state: str = Field(..., description="State", examples=["NY"])
    city: str = Field(..., description="City", examples=["New York"])
    zip_code: int = Field(..., description="Postal code", examples=[10001])
    insurance: str = Field(..., description="Insurance provider", examples=["BlueCross"])
    email: str = Field(..., description="Email address", examples=["john.doe@example.com"])

    def to_entity(self, mrn: int) -> Patient:
        return Patient(mrn=mrn, **self.model_dump())


class PatientCreate(PatientUpdate):
    """Schema for creating a new patient. The MRN is assigned by the caller."""

    mrn: int = Field(..., description="Medical Record Number (unique)", examples=[1001])

    def to_entity(self) -> Patient:
        return Patient(**self.model_dump())


class PatientResponse(PatientCreate):
    """Schema for patient response."""

    model_config = ConfigDict(from_attributes=True)


class AmbiguousDateResponse(BaseModel):
    """A patient whose stored date of birth reads differently as MM/DD and DD/MM."""

    mrn: int
    stored_value: str
