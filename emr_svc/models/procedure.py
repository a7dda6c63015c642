"""
Domain model for procedures.
"""
from dataclasses import dataclass


@dataclass
class Procedure:
    """A procedure offered by the practice and the doctor who performs it."""

    id: str
    name: str
    description: str
    duration: int  # minutes
    doctor_id: str

    @property
    def key(self) -> str:
        return self.id
