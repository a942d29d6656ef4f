import re
from typing import Mapping, Sequence

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def validate_patient_form(fields: Mapping) -> dict[str, str]:
    """Return field name -> error message for the add-patient form; empty when valid."""
    errors = {}
    if not (fields.get("firstName") or "").strip():
        errors["firstName"] = "First name is required"
    if not (fields.get("lastName") or "").strip():
        errors["lastName"] = "Last name is required"

    email = (fields.get("email") or "").strip()
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid"
    return errors


def append_item(items: Sequence[str], value: str) -> list[str]:
    """Allergies/medications: add at the end. Blank input leaves the list as it was."""
    value = (value or "").strip()
    if not value:
        return list(items or [])
    return [*(items or []), value]


def remove_item_at(items: Sequence[str], index: int) -> list[str]:
    items = list(items or [])
    if not 0 <= index < len(items):
        raise IndexError(f"No item at position {index}")
    del items[index]
    return items
