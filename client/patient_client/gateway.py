"""
Client data gateway: the four CRUD calls against the patient API.

Every call either returns parsed records or raises GatewayError; nothing is
retried, a failed call is reported once and left for the user to reissue.
"""

import logging
import httpx
from typing import Mapping, Optional
from pydantic import BaseModel, ValidationError
from patient_client.config import get_client_settings
from patient_client.models import PatientRecord

_LOGGER = logging.getLogger(__name__)


class GatewayError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(f"{status_code or 'transport'}: {message}")


def _payload(fields) -> dict:
    if isinstance(fields, BaseModel):
        return fields.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return dict(fields)


class PatientGateway:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_client_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.transport = transport

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> tuple[int, dict]:
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                         transport=self.transport) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            _LOGGER.error("Patient API unreachable (%s %s): %s", method, path, e)
            raise GatewayError("Patient service is unreachable") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error or not body.get("success"):
            message = body.get("message") or response.reason_phrase or "Request failed"
            _LOGGER.error("Patient API %s %s failed with %s: %s", method, path, response.status_code, message)
            raise GatewayError(message, status_code=response.status_code)
        return response.status_code, body

    async def _fetch(self, method: str, path: str, json: Optional[dict] = None, many: bool = False):
        """Parse the envelope's ``data`` into records; a success envelope that does not parse is a failure too."""
        status_code, body = await self._request(method, path, json=json)
        try:
            data = body["data"]
            if many:
                if not isinstance(data, list):
                    raise TypeError(f"expected a list of patients, got {type(data).__name__}")
                return [PatientRecord.model_validate(item) for item in data]
            return PatientRecord.model_validate(data)
        except (KeyError, TypeError, ValidationError) as e:
            _LOGGER.error("Patient API %s %s returned malformed data: %s", method, path, e)
            raise GatewayError("Malformed response from patient service", status_code=status_code) from e

    async def list_patients(self) -> list[PatientRecord]:
        return await self._fetch("GET", "/patients", many=True)

    async def get_patient(self, patient_id: str) -> PatientRecord:
        return await self._fetch("GET", f"/patients/{patient_id}")

    async def create_patient(self, fields: Mapping) -> PatientRecord:
        return await self._fetch("POST", "/patients", json=_payload(fields))

    async def update_patient(self, patient_id: str, fields: Mapping) -> PatientRecord:
        return await self._fetch("PUT", f"/patients/{patient_id}", json=_payload(fields))

    async def delete_patient(self, patient_id: str) -> str:
        _, body = await self._request("DELETE", f"/patients/{patient_id}")
        return body.get("message", "")
