import uuid
from enum import Enum

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID primary key"""
    return str(uuid.uuid4())


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# Statuses that occupy a (professional, date, time) slot
ACTIVE_STATUSES = (
    AppointmentStatus.PENDING.value,
    AppointmentStatus.CONFIRMED.value,
    AppointmentStatus.COMPLETED.value,
)

ACTIVE_SLOT_INDEX = "uq_appointments_active_slot"


class Salon(Base):
    __tablename__ = "salons"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), unique=True, index=True, nullable=False)  # one salon per owner
    name = Column(String(255), nullable=False)
    slug = Column(String(120), unique=True, index=True, nullable=True)  # public booking page path
    description = Column(Text, nullable=True)
    welcome_text = Column(Text, nullable=True)
    whatsapp = Column(String(30), nullable=True)
    working_days = Column(JSON, nullable=True)  # e.g. [1, 2, 3, 4, 5, 6] (0 = Sunday)
    opening_hours = Column(JSON, nullable=True)  # e.g. {"start": "09:00", "end": "18:00"}
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    professionals = relationship("Professional", back_populates="salon")
    services = relationship("Service", back_populates="salon")
    appointments = relationship("Appointment", back_populates="salon")


class Professional(Base):
    __tablename__ = "professionals"

    id = Column(String(36), primary_key=True, default=generate_id)
    salon_id = Column(String(36), ForeignKey("salons.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    specialty = Column(String(255), nullable=True)
    photo_url = Column(String(500), nullable=True)
    available_days = Column(JSON, nullable=True)  # subset of the salon's working days
    available_hours = Column(JSON, nullable=True)  # {"start": "HH:MM", "end": "HH:MM"}
    is_active = Column(Boolean, default=True, nullable=False)  # soft delete
    created_at = Column(DateTime, server_default=func.now())

    salon = relationship("Salon", back_populates="professionals")
    service_links = relationship("ProfessionalService", back_populates="professional")


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    salon_id = Column(String(36), ForeignKey("salons.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=True)
    duration = Column(Integer, default=30, nullable=False)  # minutes
    price = Column(Numeric(10, 2), default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    salon = relationship("Salon", back_populates="services")
    professional_links = relationship("ProfessionalService", back_populates="service")


class ProfessionalService(Base):
    """Which professionals can perform which services"""

    __tablename__ = "professional_services"
    __table_args__ = (UniqueConstraint("professional_id", "service_id", name="uq_professional_service"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    professional_id = Column(
        String(36), ForeignKey("professionals.id", ondelete="CASCADE"), index=True, nullable=False
    )
    service_id = Column(String(36), ForeignKey("services.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    professional = relationship("Professional", back_populates="service_links")
    service = relationship("Service", back_populates="professional_links")


class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = (
        # At most one non-cancelled appointment per (professional, date, time)
        Index(
            ACTIVE_SLOT_INDEX,
            "professional_id",
            "date",
            "time",
            unique=True,
            postgresql_where=text("status <> 'cancelled'"),
            sqlite_where=text("status <> 'cancelled'"),
        ),
        Index("ix_appointments_salon_date", "salon_id", "date"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    salon_id = Column(String(36), ForeignKey("salons.id"), index=True, nullable=False)
    professional_id = Column(String(36), ForeignKey("professionals.id"), index=True, nullable=False)
    service_id = Column(String(36), ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD, never a timestamp
    time = Column(String(5), nullable=False)  # HH:MM
    status = Column(String(20), default=AppointmentStatus.CONFIRMED.value, nullable=False)
    client_name = Column(String(100), nullable=False)
    client_phone = Column(String(11), nullable=False)  # digits only
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    salon = relationship("Salon", back_populates="appointments")
    professional = relationship("Professional")
    service = relationship("Service")


class Subscription(Base):
    """Local projection of the billing provider's subscription state"""

    __tablename__ = "subscriptions"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), unique=True, index=True, nullable=False)  # salon owner id
    status = Column(String(50), default="inactive", nullable=False)  # active, past_due, canceled, inactive
    plan = Column(String(50), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    current_period_end = Column(DateTime, nullable=True)
    stripe_customer_id = Column(String(255), nullable=True)
    stripe_subscription_id = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
