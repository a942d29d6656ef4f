"""
Client-side state for the dashboard list and the patient detail view.

Each action issues one gateway call. On success the local state is reconciled
from the server's answer; on failure a notification is raised and the state
is left exactly as it was. Actions are not serialized against each other.
"""

import logging
from datetime import date
from typing import Mapping, Optional
from patient_client.forms import validate_patient_form
from patient_client.gateway import GatewayError, PatientGateway
from patient_client.models import PatientRecord
from patient_client.notifications import NotificationService
from patient_client.views import DashboardStats, compute_stats, filter_patients

_LOGGER = logging.getLogger(__name__)


class PatientDashboard:
    def __init__(self, gateway: PatientGateway, notifications: NotificationService):
        self.gateway = gateway
        self.notifications = notifications
        self.patients: list[PatientRecord] = []
        self.search_term = ""
        self.filter_status = "all"
        self.current_tab = "all"
        self.is_loading = False
        self.form_errors: dict[str, str] = {}

    async def refresh(self) -> bool:
        self.is_loading = True
        try:
            self.patients = await self.gateway.list_patients()
            return True
        except GatewayError as e:
            _LOGGER.error("Error fetching patients: %s", e)
            self.notifications.error("Failed to fetch patients data")
            return False
        finally:
            self.is_loading = False

    async def add_patient(self, fields: Mapping) -> Optional[PatientRecord]:
        self.form_errors = validate_patient_form(fields)
        if self.form_errors:
            self.notifications.error("Please fix the errors in the form")
            return None
        try:
            patient = await self.gateway.create_patient(fields)
        except GatewayError as e:
            _LOGGER.error("Error adding patient: %s", e)
            self.notifications.error("Failed to add patient")
            return None
        self.patients = [*self.patients, patient]
        self.notifications.success("Patient added successfully")
        return patient

    async def delete_patient(self, patient_id: str) -> bool:
        try:
            await self.gateway.delete_patient(patient_id)
        except GatewayError as e:
            _LOGGER.error("Error deleting patient: %s", e)
            self.notifications.error("Failed to delete patient")
            return False
        self.patients = [p for p in self.patients if p.id != patient_id]
        self.notifications.success("Patient deleted successfully")
        return True

    def visible_patients(self, today: Optional[date] = None) -> list[PatientRecord]:
        return filter_patients(
            self.patients,
            search=self.search_term,
            status=self.filter_status,
            tab=self.current_tab,
            today=today,
        )

    def stats(self, today: Optional[date] = None) -> DashboardStats:
        return compute_stats(self.patients, today=today)


class PatientDetails:
    LOAD_ERROR = "Failed to load patient details. Please try again."

    def __init__(self, gateway: PatientGateway, notifications: NotificationService, patient_id: str):
        self.gateway = gateway
        self.notifications = notifications
        self.patient_id = patient_id
        self.patient: Optional[PatientRecord] = None
        self.error: Optional[str] = None
        self.loading = False

    async def load(self) -> Optional[PatientRecord]:
        self.loading = True
        try:
            self.patient = await self.gateway.get_patient(self.patient_id)
            self.error = None
        except GatewayError as e:
            _LOGGER.error("Error fetching patient details: %s", e)
            self.error = self.LOAD_ERROR
        finally:
            self.loading = False
        return self.patient

    async def update(self, fields: Mapping) -> bool:
        return await self._put(fields, "Patient information updated", "Failed to update patient information")

    async def update_diagnosis(self, model_result: str) -> bool:
        return await self._put({"modelResult": model_result}, "Diagnosis updated successfully",
                               "Failed to update diagnosis")

    async def delete(self) -> bool:
        """True once the record is gone; the caller navigates back to the dashboard."""
        try:
            await self.gateway.delete_patient(self.patient_id)
        except GatewayError as e:
            _LOGGER.error("Error deleting patient: %s", e)
            self.notifications.error("Failed to delete patient")
            return False
        self.notifications.success("Patient deleted successfully")
        return True

    async def _put(self, fields: Mapping, success: str, failure: str) -> bool:
        try:
            # The server's record replaces the local one wholesale
            self.patient = await self.gateway.update_patient(self.patient_id, fields)
        except GatewayError as e:
            _LOGGER.error("Error updating patient: %s", e)
            self.notifications.error(failure)
            return False
        self.notifications.success(success)
        return True
