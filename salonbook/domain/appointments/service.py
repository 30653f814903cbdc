"""Appointment service - Lifecycle actions and deletion"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...exceptions import InvalidTransitionException, NotFoundException
from ...models import Appointment
from . import lifecycle
from .repository import AppointmentRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """Service layer for staff-side appointment management.

    Every action is scoped to a salon and optionally narrowed to a professional;
    appointments outside that scope are reported as not found.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()

    def get_appointment(
        self, salon_id: str, appointment_id: str, professional_id: Optional[str] = None
    ) -> Appointment:
        appointment = self.repo.get_appointment(self.db, salon_id, appointment_id, professional_id)
        if not appointment:
            raise NotFoundException("Appointment not found")
        return appointment

    def confirm(self, salon_id: str, appointment_id: str, professional_id: Optional[str] = None) -> Appointment:
        return self._apply(salon_id, appointment_id, lifecycle.CONFIRM, professional_id)

    def cancel(self, salon_id: str, appointment_id: str, professional_id: Optional[str] = None) -> Appointment:
        """Cancel; the slot becomes bookable again immediately"""
        return self._apply(salon_id, appointment_id, lifecycle.CANCEL, professional_id)

    def complete(self, salon_id: str, appointment_id: str, professional_id: Optional[str] = None) -> Appointment:
        return self._apply(salon_id, appointment_id, lifecycle.COMPLETE, professional_id)

    def delete(self, salon_id: str, appointment_id: str, professional_id: Optional[str] = None) -> None:
        """Hard delete from any status"""
        appointment = self.get_appointment(salon_id, appointment_id, professional_id)
        self.repo.delete_appointment(self.db, appointment)
        logger.info(f"🗑️ Appointment {appointment_id} deleted from salon {salon_id}")

    def _apply(
        self, salon_id: str, appointment_id: str, action: str, professional_id: Optional[str]
    ) -> Appointment:
        appointment = self.get_appointment(salon_id, appointment_id, professional_id)
        current = appointment.status

        try:
            target = lifecycle.next_status(current, action)
        except InvalidTransitionException:
            logger.warning(f"⚠️ Refused {action} on appointment {appointment_id} ({current})")
            raise

        if target == current:
            logger.info(f"ℹ️ Appointment {appointment_id} already {current}, {action} is a no-op")
            return appointment

        appointment = self.repo.update_status(self.db, appointment, target)
        logger.info(f"✅ Appointment {appointment_id}: {current} → {target}")
        return appointment

    @staticmethod
    def to_status_response(appointment: Appointment) -> dict:
        return {
            "id": appointment.id,
            "status": appointment.status,
            "allowedActions": lifecycle.allowed_actions(appointment.status),
        }
