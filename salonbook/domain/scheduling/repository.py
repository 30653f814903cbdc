"""Scheduling repository - Read-side queries for availability"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ACTIVE_STATUSES, Appointment, Professional, Salon


class SchedulingRepository:
    """Repository for availability lookups. Every query is scoped to a salon."""

    @staticmethod
    def get_salon(db: Session, salon_id: str) -> Optional[Salon]:
        return db.query(Salon).filter(Salon.id == salon_id).first()

    @staticmethod
    def get_active_professional(db: Session, salon_id: str, professional_id: str) -> Optional[Professional]:
        """Get an active professional that belongs to the salon"""
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
    def get_booked_times(db: Session, salon_id: str, professional_id: str, date: str) -> set[str]:
        """Times already taken by non-cancelled appointments on the date"""
        rows = (
            db.query(Appointment.time)
            .filter(
                Appointment.salon_id == salon_id,
                Appointment.professional_id == professional_id,
                Appointment.date == date,
                Appointment.status.in_(ACTIVE_STATUSES),
            )
            .all()
        )
        return {row.time for row in rows}
