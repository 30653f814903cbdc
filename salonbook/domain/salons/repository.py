"""Salon repository - Public directory and agenda queries"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Appointment, Professional, ProfessionalService, Salon, Service


class SalonRepository:
    """Repository for salon database operations"""

    @staticmethod
    def get_salon_by_id(db: Session, salon_id: str) -> Optional[Salon]:
        return db.query(Salon).filter(Salon.id == salon_id).first()

    @staticmethod
    def get_salon_by_slug(db: Session, slug: str) -> Optional[Salon]:
        """Get a salon by its public page slug"""
        return db.query(Salon).filter(Salon.slug == slug).first()

    @staticmethod
    def get_active_professionals(db: Session, salon_id: str) -> list[Professional]:
        return (
            db.query(Professional)
            .filter(Professional.salon_id == salon_id, Professional.is_active.is_(True))
            .order_by(Professional.created_at.asc())
            .all()
        )

    @staticmethod
    def get_active_services(db: Session, salon_id: str) -> list[Service]:
        return (
            db.query(Service)
            .filter(Service.salon_id == salon_id, Service.is_active.is_(True))
            .order_by(Service.created_at.asc())
            .all()
        )

    @staticmethod
    def get_professional_service_links(db: Session, salon_id: str) -> list[ProfessionalService]:
        """Professional-service pairs whose professional belongs to the salon"""
        return (
            db.query(ProfessionalService)
            .join(Professional, ProfessionalService.professional_id == Professional.id)
            .filter(Professional.salon_id == salon_id)
            .all()
        )

    @staticmethod
    def get_professional(db: Session, salon_id: str, professional_id: str) -> Optional[Professional]:
        """Get a professional of the salon, active or not"""
        return (
            db.query(Professional)
            .filter(Professional.id == professional_id, Professional.salon_id == salon_id)
            .first()
        )

    @staticmethod
    def get_professional_appointments(
        db: Session,
        salon_id: str,
        professional_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Appointment]:
        """A professional's agenda, newest first"""
        query = (
            db.query(Appointment)
            .options(joinedload(Appointment.service))
            .filter(
                Appointment.salon_id == salon_id,
                Appointment.professional_id == professional_id,
            )
        )

        if start_date:
            query = query.filter(Appointment.date >= start_date)
        if end_date:
            query = query.filter(Appointment.date <= end_date)
        if status:
            query = query.filter(Appointment.status == status)

        return query.order_by(Appointment.date.desc(), Appointment.time.desc()).all()

    @staticmethod
    def deactivate_professional(db: Session, professional: Professional) -> Professional:
        """Soft delete; appointments keep pointing at the professional"""
        professional.is_active = False
        db.commit()
        db.refresh(professional)
        return professional
