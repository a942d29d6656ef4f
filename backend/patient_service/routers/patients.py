import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from patient_service.database import get_db
from patient_service.exceptions import (
    InvalidPatientIdError,
    PatientConflictError,
    PatientNotFoundError,
    PatientRecordError,
    PatientValidationError,
)
from patient_service.schemas.patient import (
    MessageEnvelope,
    PatientCreate,
    PatientEnvelope,
    PatientListEnvelope,
    PatientResponse,
    PatientUpdate,
)
from patient_service.services.patient_repository import patient_repository

_LOGGER = logging.getLogger(__name__)

router = APIRouter()

SERVER_ERROR = "Server Error"

ERROR_STATUS = {
    PatientValidationError: 400,
    InvalidPatientIdError: 404,
    PatientNotFoundError: 404,
    PatientConflictError: 500,
}


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _error_response(error: Exception, action: str) -> JSONResponse:
    """Translate a repository failure into the error envelope without leaking internals."""
    if isinstance(error, PatientRecordError):
        _LOGGER.warning("Error %s: %s %s", action, error.message, error.details)
        return _failure(ERROR_STATUS.get(type(error), 500), error.message)
    _LOGGER.exception("Error %s", action)
    return _failure(500, SERVER_ERROR)


@router.get("", response_model=PatientListEnvelope)
async def list_patients(db: AsyncSession = Depends(get_db)):
    try:
        patients = await patient_repository.list(db)
    except Exception as e:
        return _error_response(e, "fetching patients")
    return PatientListEnvelope(data=[PatientResponse.model_validate(p) for p in patients])


@router.get("/{patient_id}", response_model=PatientEnvelope)
async def get_patient(patient_id: str, db: AsyncSession = Depends(get_db)):
    try:
        patient = await patient_repository.get_by_id(db, patient_id)
    except Exception as e:
        return _error_response(e, "fetching patient by ID")
    return PatientEnvelope(data=PatientResponse.model_validate(patient))


@router.post("", response_model=PatientEnvelope, status_code=201)
async def create_patient(data: PatientCreate, db: AsyncSession = Depends(get_db)):
    try:
        patient = await patient_repository.create(db, data.model_dump(exclude_unset=True))
    except Exception as e:
        return _error_response(e, "creating patient")
    return PatientEnvelope(data=PatientResponse.model_validate(patient))


@router.put("/{patient_id}", response_model=PatientEnvelope)
async def update_patient(patient_id: str, data: PatientUpdate, db: AsyncSession = Depends(get_db)):
    try:
        patient = await patient_repository.update(db, patient_id, data.model_dump(exclude_unset=True))
    except Exception as e:
        return _error_response(e, "updating patient")
    return PatientEnvelope(data=PatientResponse.model_validate(patient))


@router.delete("/{patient_id}", response_model=MessageEnvelope)
async def delete_patient(patient_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await patient_repository.delete(db, patient_id)
    except Exception as e:
        return _error_response(e, "deleting patient")
    return MessageEnvelope(success=True, message="Patient deleted")
