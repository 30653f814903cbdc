"""Appointments router - Client booking and staff lifecycle endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...database import get_db
from .booking_service import BookingService
from .schemas import (
    AppointmentCreate,
    AppointmentCreatedResponse,
    AppointmentStatusResponse,
    StaffAppointmentCreate,
)
from .service import AppointmentService

router = APIRouter(tags=["Appointments"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


# ============================================================================
# PUBLIC BOOKING
# ============================================================================


@router.post(
    "/appointments",
    response_model=AppointmentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_appointment(
    body: AppointmentCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book an appointment from the salon's public page"""
    return service.book_for_client(body)


# ============================================================================
# STAFF MANAGEMENT
# ============================================================================


@router.post(
    "/salons/{salon_id}/appointments",
    response_model=AppointmentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_staff_appointment(
    salon_id: str,
    body: StaffAppointmentCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book an appointment on behalf of a client (starts as pending by default)"""
    return service.book_for_staff(salon_id, body)


@router.post("/salons/{salon_id}/appointments/{appointment_id}/confirm", response_model=AppointmentStatusResponse)
async def confirm_appointment(
    salon_id: str,
    appointment_id: str,
    professional_id: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = service.confirm(salon_id, appointment_id, professional_id)
    return service.to_status_response(appointment)


@router.post("/salons/{salon_id}/appointments/{appointment_id}/cancel", response_model=AppointmentStatusResponse)
async def cancel_appointment(
    salon_id: str,
    appointment_id: str,
    professional_id: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = service.cancel(salon_id, appointment_id, professional_id)
    return service.to_status_response(appointment)


@router.post("/salons/{salon_id}/appointments/{appointment_id}/complete", response_model=AppointmentStatusResponse)
async def complete_appointment(
    salon_id: str,
    appointment_id: str,
    professional_id: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Mark an attended appointment as completed"""
    appointment = service.complete(salon_id, appointment_id, professional_id)
    return service.to_status_response(appointment)


@router.delete("/salons/{salon_id}/appointments/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    salon_id: str,
    appointment_id: str,
    professional_id: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Permanently delete an appointment"""
    service.delete(salon_id, appointment_id, professional_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
