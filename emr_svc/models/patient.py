"""
Domain model for patients.
"""
from dataclasses import dataclass
from datetime import date


@dataclass
class Patient:
    """
    A patient, identified by a caller-assigned Medical Record Number.

    The MRN is the key and never changes once the patient is stored.
    """

    mrn: int
    first_name: str
    last_name: str
    date_of_birth: date
    address: str
    state: str
    city: str
    zip_code: int
    insurance: str
    email: str

    @property
    def key(self) -> int:
        return self.mrn
