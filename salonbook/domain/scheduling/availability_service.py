"""Availability service - Slot candidates annotated with existing bookings"""

import logging
from datetime import date, datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from ...config import SALON_TIMEZONE, SLOT_INTERVAL_MINUTES
from ...exceptions import NotFoundException, ValidationException
from ...shared.validators import parse_date
from .repository import SchedulingRepository
from .time_calculator import available_slots

logger = logging.getLogger(__name__)


def mark_booked(slots: Iterable[str], booked_times: Iterable[str]) -> list[dict]:
    """
    One {"time", "booked"} entry per candidate slot, in the candidates' order.

    booked_times must only contain times of non-cancelled appointments for the
    same professional and date.
    """
    taken = set(booked_times)
    return [{"time": slot, "booked": slot in taken} for slot in slots]


def salon_today(tz_name: str = SALON_TIMEZONE) -> date:
    """Current calendar date in the salon's timezone"""
    return datetime.now(ZoneInfo(tz_name)).date()


class AvailabilityService:
    """Service layer for the availability read path.

    The booked flags are advisory; the booking transaction re-checks exclusivity.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = SchedulingRepository()

    def get_availability(
        self,
        salon_id: str,
        professional_id: str,
        date_str: str,
        today: Optional[date] = None,
    ) -> dict:
        try:
            target_date = parse_date(date_str)
        except ValueError as e:
            raise ValidationException(str(e)) from e

        today = today or salon_today()
        if target_date < today:
            raise ValidationException(
                "date must be today or later",
                details={"date": date_str, "today": today.isoformat()},
            )

        salon = self.repo.get_salon(self.db, salon_id)
        if not salon:
            raise NotFoundException("Salon not found")

        professional = self.repo.get_active_professional(self.db, salon_id, professional_id)
        if not professional:
            raise NotFoundException("Professional not found in this salon")

        slots = available_slots(
            target_date,
            salon.working_days,
            salon.opening_hours,
            professional.available_days,
            professional.available_hours,
            SLOT_INTERVAL_MINUTES,
        )
        booked_times = self.repo.get_booked_times(self.db, salon_id, professional_id, date_str) if slots else set()

        logger.debug(
            f"📊 Availability {professional_id} on {date_str}: {len(slots)} slots, {len(booked_times)} booked"
        )

        return {
            "salonId": salon_id,
            "professionalId": professional_id,
            "date": date_str,
            "slots": mark_booked(slots, booked_times),
        }
