import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salonbook.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Scheduling
SLOT_INTERVAL_MINUTES = int(os.getenv("SLOT_INTERVAL_MINUTES", "30"))
# Used when a salon or professional has no hours configured
DEFAULT_HOURS_START = os.getenv("DEFAULT_HOURS_START", "09:00")
DEFAULT_HOURS_END = os.getenv("DEFAULT_HOURS_END", "18:00")
# "Today" for past-date checks is evaluated in the salon's local timezone
SALON_TIMEZONE = os.getenv("SALON_TIMEZONE", "America/Sao_Paulo")

# Default appointment status per booking channel: "pending" or "confirmed"
CLIENT_BOOKING_STATUS = os.getenv("CLIENT_BOOKING_STATUS", "confirmed")
STAFF_BOOKING_STATUS = os.getenv("STAFF_BOOKING_STATUS", "pending")

# CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")

_BOOKING_STATUSES = {"pending", "confirmed"}


def validate_settings() -> None:
    """Fail fast on settings the booking core cannot work with."""
    if SLOT_INTERVAL_MINUTES < 1 or SLOT_INTERVAL_MINUTES > 60 * 24:
        raise ValueError(f"SLOT_INTERVAL_MINUTES must be between 1 and 1440, got {SLOT_INTERVAL_MINUTES}")
    for name, value in (
        ("CLIENT_BOOKING_STATUS", CLIENT_BOOKING_STATUS),
        ("STAFF_BOOKING_STATUS", STAFF_BOOKING_STATUS),
    ):
        if value not in _BOOKING_STATUSES:
            raise ValueError(f"{name} must be 'pending' or 'confirmed', got {value!r}")
    if DEFAULT_HOURS_START >= DEFAULT_HOURS_END:
        raise ValueError(
            f"DEFAULT_HOURS_START ({DEFAULT_HOURS_START}) must be before DEFAULT_HOURS_END ({DEFAULT_HOURS_END})"
        )


validate_settings()
