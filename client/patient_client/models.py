from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class PatientRecord(BaseModel):
    """A patient as the dashboard holds it in memory, parsed from the API's camelCase JSON."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    medical_history: Optional[str] = None
    allergies: list[str] = []
    medications: list[str] = []
    model_result: Optional[str] = None
    model_confidence: Optional[float] = None
    status: Optional[str] = None
    audio_file_url: Optional[str] = None
    video_file_url: Optional[str] = None
    created_at: Optional[datetime] = None
    last_visit: Optional[datetime] = None
    notes: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        protected_namespaces = ()
        extra = "ignore"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_confirmed(self) -> bool:
        return bool(self.model_result)
