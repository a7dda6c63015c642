"""
Domain model for doctors.
"""
from dataclasses import dataclass


@dataclass
class Doctor:
    """A doctor. IDs are caller-assigned and conventionally prefixed "DR-"."""

    id: str
    name: str

    @property
    def key(self) -> str:
        return self.id
