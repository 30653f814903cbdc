"""Salon domain schemas - Public page payload and agenda"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ..billing.schemas import SubscriptionStatusResponse


class PublicSalon(BaseModel):
    """Public salon fields; the owner id is never exposed"""

    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    welcome_text: Optional[str] = None
    whatsapp: Optional[str] = None
    working_days: Optional[list[int]] = None
    opening_hours: Optional[dict] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfessionalResponse(BaseModel):
    id: str
    salon_id: str
    name: str
    specialty: Optional[str] = None
    photo_url: Optional[str] = None
    available_days: Optional[list[int]] = None
    available_hours: Optional[dict] = None
    is_active: bool

    class Config:
        from_attributes = True


class ServiceResponse(BaseModel):
    id: str
    salon_id: str
    name: str
    category: Optional[str] = None
    duration: int
    price: Decimal
    is_active: bool

    class Config:
        from_attributes = True


class ProfessionalServiceLink(BaseModel):
    professional_id: str
    service_id: str

    class Config:
        from_attributes = True


class PublicSalonResponse(BaseModel):
    """Everything the public booking page needs"""

    salon: PublicSalon
    professionals: list[ProfessionalResponse]
    services: list[ServiceResponse]
    professionalServices: list[ProfessionalServiceLink]
    subscription: SubscriptionStatusResponse


class ServiceSummary(BaseModel):
    id: str
    name: str
    duration: int
    price: Decimal

    class Config:
        from_attributes = True


class AgendaAppointment(BaseModel):
    """Schema for one entry of a professional's agenda"""

    id: str
    date: str
    time: str
    status: str
    client_name: str
    client_phone: str
    service_id: Optional[str] = None
    service: Optional[ServiceSummary] = None  # None once the service row is removed
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
