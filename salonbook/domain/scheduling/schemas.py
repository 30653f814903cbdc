"""Scheduling domain schemas - Pydantic models for availability responses"""

from pydantic import BaseModel


class SlotResponse(BaseModel):
    time: str
    booked: bool


class AvailabilityResponse(BaseModel):
    """Candidate slots for one professional on one date"""

    salonId: str
    professionalId: str
    date: str
    slots: list[SlotResponse]
