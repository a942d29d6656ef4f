"""
Derived views over the in-memory patient list.

All functions are pure: they take the list (and "today" when dates matter)
and return new lists or counts. Diagnosis status here is always derived from
``model_result``; the stored ``status`` field never takes part.
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime, timezone
from typing import Iterable, Optional
from patient_client.models import PatientRecord

STATUS_FILTERS = ("all", "pending", "confirmed")
TABS = ("all", "today", "pending", "confirmed")


@dataclass(frozen=True)
class DashboardStats:
    total: int
    pending: int
    confirmed: int
    today: int

    def as_dict(self) -> dict:
        return asdict(self)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def derived_status(patient: PatientRecord) -> str:
    return "confirmed" if patient.model_result else "pending"


def created_on(patient: PatientRecord, day: date) -> bool:
    """True when the record's creation timestamp falls on ``day`` (UTC calendar date)."""
    created = patient.created_at
    if created is None:
        return False
    if created.tzinfo is not None:
        created = created.astimezone(timezone.utc)
    return created.date() == day


def matches_search(patient: PatientRecord, query: str) -> bool:
    haystack = f"{patient.first_name} {patient.last_name} {patient.email}".lower()
    return (query or "").lower() in haystack


def search_patients(patients: Iterable[PatientRecord], query: str) -> list[PatientRecord]:
    return [p for p in patients if matches_search(p, query)]


def filter_by_status(patients: Iterable[PatientRecord], status: str) -> list[PatientRecord]:
    # Unknown values (including "cancelled") have no branch and pass everything through
    if status in ("pending", "confirmed"):
        return [p for p in patients if derived_status(p) == status]
    return list(patients)


def filter_by_tab(patients: Iterable[PatientRecord], tab: str, today: Optional[date] = None) -> list[PatientRecord]:
    if tab == "today":
        today = today or utc_today()
        return [p for p in patients if created_on(p, today)]
    return filter_by_status(patients, tab)


def filter_patients(
    patients: Iterable[PatientRecord],
    search: str = "",
    status: str = "all",
    tab: str = "all",
    today: Optional[date] = None,
) -> list[PatientRecord]:
    """Apply search, status and tab filters; the order of application does not matter."""
    filtered = search_patients(patients, search)
    filtered = filter_by_status(filtered, status)
    return filter_by_tab(filtered, tab, today=today)


def compute_stats(patients: Iterable[PatientRecord], today: Optional[date] = None) -> DashboardStats:
    """Counts over the full, unfiltered list."""
    patients = list(patients)
    today = today or utc_today()
    confirmed = sum(1 for p in patients if p.model_result)
    return DashboardStats(
        total=len(patients),
        pending=len(patients) - confirmed,
        confirmed=confirmed,
        today=sum(1 for p in patients if created_on(p, today)),
    )
