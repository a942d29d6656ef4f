from patient_service.models.patient import Patient

__all__ = ["Patient"]
