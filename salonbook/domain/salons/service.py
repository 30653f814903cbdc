"""Salon service - Public booking page data, professional agenda and deactivation"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...exceptions import NotFoundException, ValidationException
from ...models import Appointment, AppointmentStatus, Professional, Salon
from ...shared.validators import parse_date
from ..billing.subscription_service import SubscriptionService
from .repository import SalonRepository

logger = logging.getLogger(__name__)

_STATUSES = {s.value for s in AppointmentStatus}


class SalonService:
    """Service layer for salon business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SalonRepository()
        self.subscriptions = SubscriptionService(db)

    def get_salon(self, salon_id: str) -> Salon:
        salon = self.repo.get_salon_by_id(self.db, salon_id)
        if not salon:
            raise NotFoundException("Salon not found")
        return salon

    def get_public_data(self, salon_id: Optional[str] = None, slug: Optional[str] = None) -> dict:
        """
        Public booking page payload, looked up by id or by slug.

        Returns:
            salon (no owner id), active professionals and services in creation
            order, the salon's professional-service links and the owner's
            subscription status
        """
        slug = (slug or "").strip()
        salon_id = (salon_id or "").strip()
        if not slug and not salon_id:
            raise ValidationException("Missing slug or salonId")

        if salon_id:
            salon = self.repo.get_salon_by_id(self.db, salon_id)
        else:
            salon = self.repo.get_salon_by_slug(self.db, slug)
        if not salon:
            logger.info(f"ℹ️ Public salon not found (id={salon_id or '-'}, slug={slug or '-'})")
            raise NotFoundException("Salon not found")

        professionals = self.repo.get_active_professionals(self.db, salon.id)
        services = self.repo.get_active_services(self.db, salon.id)
        links = self.repo.get_professional_service_links(self.db, salon.id)
        subscription = self.subscriptions.get_status(salon.owner_id)

        logger.info(
            f"📊 Public data for salon {salon.id}: {len(professionals)} professionals, "
            f"{len(services)} services, subscription {subscription['status']}"
        )

        return {
            "salon": salon,
            "professionals": professionals,
            "services": services,
            "professionalServices": links,
            "subscription": subscription,
        }

    def get_professional_agenda(
        self,
        salon_id: str,
        professional_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Appointment]:
        """A professional's appointments, newest first, optionally filtered"""
        for value in (start_date, end_date):
            if value:
                try:
                    parse_date(value)
                except ValueError as e:
                    raise ValidationException(str(e)) from e
        if status and status not in _STATUSES:
            raise ValidationException(f"status must be one of {', '.join(sorted(_STATUSES))}")

        self.get_professional(salon_id, professional_id)
        return self.repo.get_professional_appointments(
            self.db, salon_id, professional_id, start_date, end_date, status
        )

    def get_professional(self, salon_id: str, professional_id: str) -> Professional:
        professional = self.repo.get_professional(self.db, salon_id, professional_id)
        if not professional:
            raise NotFoundException("Professional not found in this salon")
        return professional

    def deactivate_professional(self, salon_id: str, professional_id: str) -> Professional:
        """Hide a professional from booking; existing appointments are untouched"""
        professional = self.get_professional(salon_id, professional_id)
        if not professional.is_active:
            return professional

        professional = self.repo.deactivate_professional(self.db, professional)
        logger.info(f"✅ Professional {professional_id} deactivated in salon {salon_id}")
        return professional
