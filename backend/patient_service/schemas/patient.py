from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class CamelModel(BaseModel):
    """Payloads use the dashboard's camelCase names; snake_case is accepted on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        protected_namespaces = ()


class PatientFields(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    medical_history: Optional[str] = None
    allergies: Optional[list[str]] = None
    medications: Optional[list[str]] = None
    model_result: Optional[str] = None
    model_confidence: Optional[float] = Field(default=None, ge=0, le=1)
    status: Optional[str] = None
    audio_file_url: Optional[str] = None
    video_file_url: Optional[str] = None
    last_visit: Optional[datetime] = None
    notes: Optional[str] = None


class PatientCreate(PatientFields):
    # Required fields are checked by the repository so that a missing field
    # gets the same answer whether it was omitted or sent empty.
    pass


class PatientUpdate(PatientFields):
    pass


class PatientResponse(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
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
    audio_file_url: str
    video_file_url: str
    created_at: datetime
    last_visit: Optional[datetime] = None
    notes: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        protected_namespaces = ()
        from_attributes = True


class PatientEnvelope(BaseModel):
    success: bool = True
    data: PatientResponse


class PatientListEnvelope(BaseModel):
    success: bool = True
    data: list[PatientResponse]


class MessageEnvelope(BaseModel):
    success: bool
    message: str
