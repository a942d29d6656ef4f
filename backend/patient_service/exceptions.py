class PatientRecordError(Exception):
    """Base class for failures raised by the patient repository.

    ``message`` is always safe to hand back to an API caller.
    """

    message = "Server Error"

    def __init__(self, message: str = None, details: dict = None):
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class PatientValidationError(PatientRecordError):
    message = "Patient record failed validation"

    def __init__(self, message: str = None, fields: list = None):
        self.fields = list(fields or [])
        super().__init__(message, details={"fields": self.fields})


class PatientConflictError(PatientRecordError):
    message = "A patient with this email already exists"


class InvalidPatientIdError(PatientRecordError):
    message = "Invalid Patient Id"

    def __init__(self, patient_id):
        self.patient_id = patient_id
        super().__init__(details={"patient_id": patient_id})


class PatientNotFoundError(PatientRecordError):
    message = "Patient not found"

    def __init__(self, patient_id: str):
        self.patient_id = patient_id
        super().__init__(details={"patient_id": patient_id})
