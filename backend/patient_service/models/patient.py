import re
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Float, DateTime, JSON
from sqlalchemy.orm import validates
from patient_service.database import Base

PATIENT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{32}")

# (attribute, payload name) pairs that must be non-empty on every write
REQUIRED_FIELDS = [
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("email", "email"),
    ("audio_file_url", "audioFileUrl"),
    ("video_file_url", "videoFileUrl"),
]


def new_patient_id() -> str:
    return uuid.uuid4().hex


def is_valid_patient_id(value) -> bool:
    return isinstance(value, str) and PATIENT_ID_PATTERN.fullmatch(value) is not None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(32), primary_key=True, default=new_patient_id)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String)
    date_of_birth = Column(String)
    gender = Column(String)
    address = Column(Text)
    medical_history = Column(Text)
    allergies = Column(JSON, default=list)
    medications = Column(JSON, default=list)
    model_result = Column(Text)
    model_confidence = Column(Float)
    status = Column(String, default="pending")
    audio_file_url = Column(Text, nullable=False)
    video_file_url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    last_visit = Column(DateTime(timezone=True))
    notes = Column(Text)

    @validates("first_name", "last_name")
    def _trim_name(self, key, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @validates("email")
    def _normalize_email(self, key, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def is_confirmed(self) -> bool:
        """Diagnosis counts as confirmed once a model result has been recorded."""
        return bool(self.model_result)

    def __repr__(self) -> str:
        return f"<Patient {self.id} {self.email}>"
