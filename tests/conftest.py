"""Shared test fixtures and helpers."""

import os

# The application engine must never touch a file database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

from datetime import datetime  # noqa: E402
from types import SimpleNamespace  # noqa: E402
from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from salonbook.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from salonbook.main import app  # noqa: E402
from salonbook.models import (  # noqa: E402
    Appointment,
    Professional,
    ProfessionalService,
    Salon,
    Service,
    Subscription,
)

MONDAY = "2030-06-03"
SATURDAY = "2030-06-08"
SUNDAY = "2030-06-09"

WEEKDAYS_MON_SAT = [1, 2, 3, 4, 5, 6]
WEEKDAYS_MON_FRI = [1, 2, 3, 4, 5]


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_salon(
    db,
    owner_id: str,
    name: str = "Studio Bella",
    slug: Optional[str] = None,
    working_days: Optional[list[int]] = None,
    opening_hours: Optional[dict] = None,
    subscription_status: Optional[str] = "active",
) -> Salon:
    """Create a salon and, unless subscription_status is None, its owner's subscription."""
    salon = Salon(
        owner_id=owner_id,
        name=name,
        slug=slug,
        working_days=WEEKDAYS_MON_SAT if working_days is None else working_days,
        opening_hours=opening_hours or {"start": "09:00", "end": "18:00"},
    )
    db.add(salon)
    if subscription_status is not None:
        db.add(
            Subscription(
                user_id=owner_id,
                status=subscription_status,
                plan="pro",
                current_period_end=datetime(2030, 12, 31),
            )
        )
    db.commit()
    db.refresh(salon)
    return salon


def make_professional(
    db,
    salon: Salon,
    name: str = "Ana",
    available_days: Optional[list[int]] = None,
    available_hours: Optional[dict] = None,
    is_active: bool = True,
) -> Professional:
    professional = Professional(
        salon_id=salon.id,
        name=name,
        specialty="Hair",
        available_days=WEEKDAYS_MON_FRI if available_days is None else available_days,
        available_hours=available_hours or {"start": "10:00", "end": "19:00"},
        is_active=is_active,
    )
    db.add(professional)
    db.commit()
    db.refresh(professional)
    return professional


def make_service(db, salon: Salon, name: str = "Corte", is_active: bool = True) -> Service:
    service = Service(salon_id=salon.id, name=name, duration=30, price=50, is_active=is_active)
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


def make_appointment(
    db,
    salon: Salon,
    professional: Professional,
    service: Optional[Service] = None,
    date: str = MONDAY,
    time: str = "10:00",
    status: str = "confirmed",
) -> Appointment:
    appointment = Appointment(
        salon_id=salon.id,
        professional_id=professional.id,
        service_id=service.id if service else None,
        date=date,
        time=time,
        status=status,
        client_name="Maria Souza",
        client_phone="11988887777",
    )
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    return appointment


@pytest.fixture
def salon_setup(db):
    """One entitled salon with a linked professional and service, plus a second tenant."""
    salon = make_salon(db, owner_id="00000000-0000-4000-8000-000000000001", slug="studio-bella")
    professional = make_professional(db, salon)
    service = make_service(db, salon)
    db.add(ProfessionalService(professional_id=professional.id, service_id=service.id))
    db.commit()

    other_salon = make_salon(
        db, owner_id="00000000-0000-4000-8000-000000000002", name="Outro Salão", slug="outro"
    )
    other_professional = make_professional(db, other_salon, name="Bruno")
    other_service = make_service(db, other_salon, name="Barba")

    return SimpleNamespace(
        salon=salon,
        professional=professional,
        service=service,
        other_salon=other_salon,
        other_professional=other_professional,
        other_service=other_service,
    )


def booking_payload(setup, **overrides) -> dict:
    """Valid public booking body for salon_setup"""
    payload = {
        "salonId": setup.salon.id,
        "professionalId": setup.professional.id,
        "serviceId": setup.service.id,
        "date": MONDAY,
        "time": "10:00",
        "clientName": "Maria Souza",
        "clientPhone": "(11) 98888-7777",
    }
    payload.update(overrides)
    return payload

