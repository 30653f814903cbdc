"""Appointment domain schemas - Pydantic models for validation"""

from pydantic import BaseModel, field_validator

from ...shared.validators import (
    require_uuid,
    validate_br_phone,
    validate_client_name,
    validate_date_string,
    validate_time_string,
)


class BookingRequestBase(BaseModel):
    """Structural validation shared by both booking channels.

    Fields are validated in declaration order, so the first error reported is
    the first invalid field.
    """

    @field_validator("salonId", "professionalId", "serviceId", check_fields=False)
    @classmethod
    def validate_ids(cls, v, info):
        return require_uuid(v, info.field_name)

    @field_validator("date", check_fields=False)
    @classmethod
    def validate_date(cls, v):
        return validate_date_string(v)

    @field_validator("time", check_fields=False)
    @classmethod
    def validate_time(cls, v):
        return validate_time_string(v)

    @field_validator("clientName", check_fields=False)
    @classmethod
    def validate_name(cls, v):
        return validate_client_name(v)

    @field_validator("clientPhone", check_fields=False)
    @classmethod
    def validate_phone(cls, v):
        return validate_br_phone(v)


class AppointmentCreate(BookingRequestBase):
    """Schema for a client booking from the public page"""

    salonId: str
    professionalId: str
    serviceId: str
    date: str
    time: str
    clientName: str
    clientPhone: str


class StaffAppointmentCreate(BookingRequestBase):
    """Schema for an appointment created by the salon owner or a professional (salon from the URL)"""

    professionalId: str
    serviceId: str
    date: str
    time: str
    clientName: str
    clientPhone: str


class AppointmentCreatedResponse(BaseModel):
    """Schema for a successful booking"""

    id: str
    date: str
    time: str
    status: str

    class Config:
        from_attributes = True


class AppointmentStatusResponse(BaseModel):
    """Schema for the result of a lifecycle action"""

    id: str
    status: str
    allowedActions: list[str]
