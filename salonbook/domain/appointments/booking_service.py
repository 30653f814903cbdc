"""
Booking service - the appointment creation transaction

Order, failing fast:
1. structural validation (request schemas, before any query)
2. salon exists
3. salon owner has an active subscription
4. professional and service are active and belong to the salon
5. no non-cancelled appointment holds (professional, date, time)
6. insert with the channel's default status

Step 5 is advisory under concurrency. The partial unique index
uq_appointments_active_slot is the authority; a violation at commit is
reported as the same conflict. Nothing is retried.
"""

import logging
from typing import Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import CLIENT_BOOKING_STATUS, STAFF_BOOKING_STATUS
from ...exceptions import (
    BookingConflictException,
    EntitlementException,
    NotFoundException,
    PersistenceException,
    ValidationException,
)
from ...models import ACTIVE_SLOT_INDEX, Appointment
from ...shared.validators import validate_uuid
from ..billing.subscription_service import SubscriptionService
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, StaffAppointmentCreate

logger = logging.getLogger(__name__)

CLIENT_CHANNEL = "client"
STAFF_CHANNEL = "staff"

# SQLite reports the columns instead of the index name
_SQLITE_ACTIVE_SLOT_MESSAGE = "UNIQUE constraint failed: appointments.professional_id"


def is_active_slot_violation(integrity_error: IntegrityError) -> bool:
    """True when the IntegrityError comes from the one-active-appointment-per-slot index"""
    orig = getattr(integrity_error, "orig", None)
    diag = getattr(orig, "diag", None)

    constraint_name = ""
    if diag is not None:
        constraint_name = getattr(diag, "constraint_name", "") or ""
    if constraint_name:
        return constraint_name == ACTIVE_SLOT_INDEX

    text = str(orig) if orig is not None else str(integrity_error)
    return ACTIVE_SLOT_INDEX in text or _SQLITE_ACTIVE_SLOT_MESSAGE in text


class BookingService:
    """Service layer for creating appointments"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()
        self.subscriptions = SubscriptionService(db)

    def book_for_client(self, data: AppointmentCreate) -> Appointment:
        """Public page booking; defaults to CLIENT_BOOKING_STATUS"""
        return self._book(data.salonId, data, CLIENT_BOOKING_STATUS, CLIENT_CHANNEL)

    def book_for_staff(self, salon_id: str, data: StaffAppointmentCreate) -> Appointment:
        """Owner or professional booking; defaults to STAFF_BOOKING_STATUS"""
        if not validate_uuid(salon_id):
            raise ValidationException("salonId must be a valid id")
        return self._book(salon_id, data, STAFF_BOOKING_STATUS, STAFF_CHANNEL)

    def _book(
        self,
        salon_id: str,
        data: Union[AppointmentCreate, StaffAppointmentCreate],
        status: str,
        channel: str,
    ) -> Appointment:
        logger.info(
            f"📥 Booking request ({channel}) salon={salon_id} professional={data.professionalId} "
            f"{data.date} {data.time}"
        )

        salon = self.repo.get_salon(self.db, salon_id)
        if not salon:
            logger.warning(f"⚠️ Salon not found: {salon_id}")
            raise NotFoundException("Salon not found")

        if not self.subscriptions.is_active(salon.owner_id):
            logger.warning(f"⚠️ Booking refused, subscription inactive for salon {salon_id}")
            raise EntitlementException("Salon subscription is not active")

        if not self.repo.get_active_professional(self.db, salon_id, data.professionalId):
            logger.warning(f"⚠️ Professional {data.professionalId} not found in salon {salon_id}")
            raise NotFoundException("Professional not found in this salon")

        if not self.repo.get_active_service(self.db, salon_id, data.serviceId):
            logger.warning(f"⚠️ Service {data.serviceId} not found in salon {salon_id}")
            raise NotFoundException("Service not found in this salon")

        slot = {"professional_id": data.professionalId, "date": data.date, "time": data.time}

        if self.repo.find_active_appointment(self.db, salon_id, data.professionalId, data.date, data.time):
            logger.info(f"⚠️ Slot already booked: {slot}")
            raise BookingConflictException(details=slot)

        return self._insert(salon_id, data, status, slot)

    def _insert(
        self,
        salon_id: str,
        data: Union[AppointmentCreate, StaffAppointmentCreate],
        status: str,
        slot: dict,
    ) -> Appointment:
        try:
            appointment = self.repo.create_appointment(
                self.db,
                salon_id=salon_id,
                professional_id=data.professionalId,
                service_id=data.serviceId,
                date=data.date,
                time=data.time,
                client_name=data.clientName,
                client_phone=data.clientPhone,
                status=status,
            )
        except IntegrityError as exc:
            self.db.rollback()
            if is_active_slot_violation(exc):
                logger.info(f"⚠️ Slot taken by a concurrent booking: {slot}")
                raise BookingConflictException(details=slot) from exc
            logger.error(f"❌ Integrity error creating appointment: {exc}")
            raise PersistenceException() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"❌ Failed to create appointment: {exc}")
            raise PersistenceException() from exc

        logger.info(f"✅ Appointment created: {appointment.id} ({appointment.status})")
        return appointment

