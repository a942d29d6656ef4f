"""Display helpers for patient fields."""

import logging
import re
from datetime import date, datetime
from typing import Optional, Union

_LOGGER = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, None]


def _parse_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept a trailing "Z" the way ISO strings from the API may carry it
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def format_date(value: DateLike) -> str:
    """'2025-04-15' -> 'April 15, 2025'."""
    if not value:
        return "N/A"
    try:
        parsed = _parse_date(value)
    except (AttributeError, TypeError, ValueError):
        _LOGGER.error("Error formatting date: %r", value)
        return "Invalid date"
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_phone_number(phone: Optional[str]) -> str:
    if not phone:
        return ""
    cleaned = re.sub(r"\D", "", phone)
    if len(cleaned) == 10:
        return f"({cleaned[:3]}) {cleaned[3:6]}-{cleaned[6:]}"
    if len(cleaned) == 11:
        return f"+{cleaned[0]} ({cleaned[1:4]}) {cleaned[4:7]}-{cleaned[7:]}"
    return phone


def truncate_string(value: Optional[str], length: int = 50) -> str:
    if not value:
        return ""
    if len(value) <= length:
        return value
    return f"{value[:length]}..."


def capitalize_words(value: Optional[str]) -> str:
    if not value:
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split(" "))


def get_initials(first_name: Optional[str], last_name: Optional[str]) -> str:
    if not first_name and not last_name:
        return "??"
    return f"{(first_name or '')[:1]}{(last_name or '')[:1]}".upper()


def calculate_age(date_of_birth: DateLike, today: Optional[date] = None) -> Optional[int]:
    if not date_of_birth:
        return None
    try:
        born = _parse_date(date_of_birth)
    except (AttributeError, TypeError, ValueError):
        _LOGGER.error("Error calculating age: %r", date_of_birth)
        return None
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


def format_confidence(confidence: Optional[float]) -> str:
    """Model confidence is stored as a fraction and shown as a percentage."""
    if confidence is None:
        return "N/A"
    return f"{round(confidence * 100)}%"
