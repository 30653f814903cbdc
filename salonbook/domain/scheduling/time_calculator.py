"""
Time calculator - pure slot computation for a professional on a given date.

Times are zero-padded "HH:MM" strings, so lexical comparison equals
chronological comparison. Weekday indices follow Sunday = 0 ... Saturday = 6.

Precondition: callers pass only today-or-later dates. Nothing here knows
what "today" is; the availability endpoint rejects past dates before calling in.
"""

from datetime import date
from typing import Optional

from ...config import DEFAULT_HOURS_END, DEFAULT_HOURS_START, SLOT_INTERVAL_MINUTES


def weekday_index(target_date: date) -> int:
    """Sunday = 0, Monday = 1 ... Saturday = 6"""
    return target_date.isoweekday() % 7


def to_minutes(hhmm: str) -> int:
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def format_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def resolve_hours(hours: Optional[dict]) -> tuple[str, str]:
    """Configured {"start", "end"} or the default opening hours."""
    if not hours:
        return DEFAULT_HOURS_START, DEFAULT_HOURS_END
    return hours.get("start") or DEFAULT_HOURS_START, hours.get("end") or DEFAULT_HOURS_END


def is_day_eligible(target_date: date, salon_days: Optional[list], professional_days: Optional[list]) -> bool:
    """The weekday must be a salon working day AND a professional available day.

    A missing list means no days at all.
    """
    day = weekday_index(target_date)
    return day in (salon_days or []) and day in (professional_days or [])


def effective_window(salon_hours: Optional[dict], professional_hours: Optional[dict]) -> Optional[tuple[str, str]]:
    """Intersect salon and professional hours; None when the intersection is empty."""
    salon_start, salon_end = resolve_hours(salon_hours)
    prof_start, prof_end = resolve_hours(professional_hours)

    start = max(salon_start, prof_start)
    end = min(salon_end, prof_end)
    if start >= end:
        return None
    return start, end


def generate_slots(start: str, end: str, interval: int = SLOT_INTERVAL_MINUTES) -> list[str]:
    """Slot labels from start (inclusive) to end (exclusive), stepping by interval minutes."""
    if interval <= 0:
        raise ValueError("interval must be a positive number of minutes")

    slots = []
    current = to_minutes(start)
    stop = to_minutes(end)
    while current < stop:
        slots.append(format_minutes(current))
        current += interval
    return slots


def available_slots(
    target_date: date,
    salon_days: Optional[list],
    salon_hours: Optional[dict],
    professional_days: Optional[list],
    professional_hours: Optional[dict],
    interval: int = SLOT_INTERVAL_MINUTES,
) -> list[str]:
    """
    Candidate slots for one professional on one date, before existing bookings.

    Returns [] when the day is not shared by salon and professional or when
    their hours do not overlap. That is "no availability", not an error.
    """
    if not is_day_eligible(target_date, salon_days, professional_days):
        return []

    window = effective_window(salon_hours, professional_hours)
    if window is None:
        return []

    start, end = window
    return generate_slots(start, end, interval)
