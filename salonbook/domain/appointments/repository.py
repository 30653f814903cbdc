"""Appointment repository - Database operations for appointments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ACTIVE_STATUSES, Appointment, Professional, Salon, Service


class AppointmentRepository:
    """Repository for appointment database operations. Every query carries the salon id."""

    @staticmethod
    def get_salon(db: Session, salon_id: str) -> Optional[Salon]:
        return db.query(Salon).filter(Salon.id == salon_id).first()

    @staticmethod
    def get_active_professional(db: Session, salon_id: str, professional_id: str) -> Optional[Professional]:
        return (
            db.query(Professional)
            .filter(
                Professional.id == professional_id,
                Professional.salon_id == salon_id,
                Professional.is_active.is_(True),
            )
            .first()
        )

    @staticmethod
    def get_active_service(db: Session, salon_id: str, service_id: str) -> Optional[Service]:
        return (
            db.query(Service)
            .filter(
                Service.id == service_id,
                Service.salon_id == salon_id,
                Service.is_active.is_(True),
            )
            .first()
        )

    @staticmethod
    def find_active_appointment(
        db: Session, salon_id: str, professional_id: str, date: str, time: str
    ) -> Optional[Appointment]:
        """Non-cancelled appointment occupying the slot, if any"""
        return (
            db.query(Appointment)
            .filter(
                Appointment.salon_id == salon_id,
                Appointment.professional_id == professional_id,
                Appointment.date == date,
                Appointment.time == time,
                Appointment.status.in_(ACTIVE_STATUSES),
            )
            .first()
        )

    @staticmethod
    def create_appointment(db: Session, **appointment_data) -> Appointment:
        """Insert and commit a new appointment"""
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def get_appointment(
        db: Session, salon_id: str, appointment_id: str, professional_id: Optional[str] = None
    ) -> Optional[Appointment]:
        """Get an appointment within the salon, optionally narrowed to one professional"""
        query = db.query(Appointment).filter(
            Appointment.id == appointment_id,
            Appointment.salon_id == salon_id,
        )
        if professional_id:
            query = query.filter(Appointment.professional_id == professional_id)
        return query.first()

    @staticmethod
    def update_status(db: Session, appointment: Appointment, status: str) -> Appointment:
        appointment.status = status
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment: Appointment) -> None:
        db.delete(appointment)
        db.commit()
