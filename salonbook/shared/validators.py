"""Shared validation utilities"""

import re
import uuid
from datetime import date, datetime
from typing import Optional

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

CLIENT_NAME_MIN_LENGTH = 2
CLIENT_NAME_MAX_LENGTH = 100


def validate_uuid(value: str) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False


def require_uuid(value: Optional[str], field: str) -> str:
    if not value or not isinstance(value, str):
        raise ValueError(f"{field} is required")
    if not validate_uuid(value):
        raise ValueError(f"{field} must be a valid id")
    return value


def parse_date(value: Optional[str]) -> date:
    """
    Parse a YYYY-MM-DD string into a calendar date.

    Raises:
        ValueError: If the format is wrong or the day does not exist (e.g. 2025-02-30)
    """
    if not value or not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValueError("date is required and must be in YYYY-MM-DD format")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("date must be a valid calendar date")


def validate_date_string(value: Optional[str]) -> str:
    parse_date(value)
    return value


def validate_time_string(value: Optional[str]) -> str:
    """HH:MM, hours 00-23, minutes 00-59"""
    if not value or not isinstance(value, str) or not TIME_PATTERN.match(value):
        raise ValueError("time is required and must be in HH:MM format")
    return value


def validate_client_name(name: Optional[str]) -> str:
    """Return the trimmed client name."""
    if not name or not isinstance(name, str) or len(name.strip()) < CLIENT_NAME_MIN_LENGTH:
        raise ValueError(
            f"clientName is required and must have at least {CLIENT_NAME_MIN_LENGTH} characters"
        )
    name = name.strip()
    if len(name) > CLIENT_NAME_MAX_LENGTH:
        raise ValueError(f"clientName must be less than {CLIENT_NAME_MAX_LENGTH} characters")
    return name


def normalize_phone_digits(phone: Optional[str]) -> str:
    """Strip every non-digit character"""
    return re.sub(r"\D", "", phone or "")


def validate_br_phone(phone: Optional[str]) -> str:
    """
    Validate a Brazilian phone number and normalize it to digits only.

    Args:
        phone: Phone number in any format, e.g. "(11) 98888-7777"

    Returns:
        Digits only, area code included (10 digits landline, 11 digits mobile)

    Raises:
        ValueError: If the phone number is missing or has the wrong length
    """
    if not phone or not isinstance(phone, str):
        raise ValueError("clientPhone is required")

    digits = normalize_phone_digits(phone)

    if len(digits) < 10 or len(digits) > 11:
        raise ValueError("clientPhone must be a valid Brazilian phone number")

    return digits
