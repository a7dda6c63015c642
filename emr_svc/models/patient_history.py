"""
Domain model for patient history records.
"""
from dataclasses import dataclass
from datetime import date


@dataclass
class PatientHistory:
    """
    One procedure performed on a patient by a doctor, with its billing.

    Ties together a Patient (by MRN), a Procedure and a Doctor.
    """

    id: str
    patient_id: int
    procedure_id: str
    date: date
    billing: float
    doctor_id: str

    @property
    def key(self) -> str:
        return self.id
