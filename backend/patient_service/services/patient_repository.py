"""
Patient repository: CRUD primitives over the patients table.

Every method takes the request's AsyncSession and raises the typed errors from
patient_service.exceptions; callers decide how those map onto a transport.
"""

import logging
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from patient_service.exceptions import (
    InvalidPatientIdError,
    PatientConflictError,
    PatientNotFoundError,
    PatientValidationError,
)
from patient_service.models.patient import Patient, REQUIRED_FIELDS, is_valid_patient_id

_LOGGER = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = (
    "Please provide all required fields: firstName, lastName, email, audioFileUrl, and videoFileUrl."
)

# Assigned by the store, never taken from a payload
IMMUTABLE_FIELDS = {"id", "created_at"}
LIST_FIELDS = ("allergies", "medications")


def _clean_fields(fields: dict) -> dict:
    cleaned = {k: v for k, v in fields.items() if k not in IMMUTABLE_FIELDS}
    for key in LIST_FIELDS:
        if key in cleaned and cleaned[key] is None:
            cleaned[key] = []
    return cleaned


def _check_id(patient_id) -> str:
    if not is_valid_patient_id(patient_id):
        raise InvalidPatientIdError(patient_id)
    return patient_id.lower()


def _validate(patient: Patient) -> None:
    missing = [
        name for attr, name in REQUIRED_FIELDS
        if not isinstance(getattr(patient, attr), str) or not getattr(patient, attr).strip()
    ]
    if missing:
        raise PatientValidationError(REQUIRED_FIELDS_MESSAGE, fields=missing)

    confidence = patient.model_confidence
    if confidence is not None and not 0 <= confidence <= 1:
        raise PatientValidationError("modelConfidence must be between 0 and 1", fields=["modelConfidence"])

    for key in LIST_FIELDS:
        items = getattr(patient, key)
        if items is not None and not all(isinstance(item, str) for item in items):
            raise PatientValidationError(f"{key} must be a list of strings", fields=[key])


class PatientRepository:
    async def list(self, db: AsyncSession) -> list[Patient]:
        # No ORDER BY: the store's natural retrieval order is passed through
        result = await db.execute(select(Patient))
        return list(result.scalars().all())

    async def get_by_id(self, db: AsyncSession, patient_id: str) -> Patient:
        patient_id = _check_id(patient_id)
        patient = await db.get(Patient, patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id)
        return patient

    async def create(self, db: AsyncSession, fields: dict) -> Patient:
        patient = Patient(**_clean_fields(fields))
        if patient.status is None:
            patient.status = "pending"
        _validate(patient)
        await self._ensure_unique_email(db, patient.email)

        db.add(patient)
        await self._commit(db)
        await db.refresh(patient)
        _LOGGER.info("Created patient %s", patient.id)
        return patient

    async def update(self, db: AsyncSession, patient_id: str, fields: dict) -> Patient:
        patient = await self.get_by_id(db, patient_id)
        fields = _clean_fields(fields)

        email = fields.get("email")
        if isinstance(email, str):
            await self._ensure_unique_email(db, email.strip().lower(), exclude_id=patient.id)

        for key, value in fields.items():
            setattr(patient, key, value)
        try:
            _validate(patient)
        except PatientValidationError:
            await db.rollback()
            raise

        await self._commit(db)
        await db.refresh(patient)
        _LOGGER.info("Updated patient %s", patient.id)
        return patient

    async def delete(self, db: AsyncSession, patient_id: str) -> None:
        """Delete without checking existence; removing an absent id is a no-op."""
        patient_id = _check_id(patient_id)
        await db.execute(delete(Patient).where(Patient.id == patient_id))
        await db.commit()
        _LOGGER.info("Deleted patient %s", patient_id)

    async def _ensure_unique_email(self, db: AsyncSession, email: str, exclude_id: str = None) -> None:
        query = select(Patient.id).where(Patient.email == email)
        if exclude_id is not None:
            query = query.where(Patient.id != exclude_id)
        if await db.scalar(query) is not None:
            raise PatientConflictError()

    async def _commit(self, db: AsyncSession) -> None:
        # The unique index is the final word when two writers race past the pre-check
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise PatientConflictError(details={"error": str(e.orig)}) from e


patient_repository = PatientRepository()
