"""Salons router - Public booking page data and professional endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import AgendaAppointment, ProfessionalResponse, PublicSalonResponse
from .service import SalonService

router = APIRouter(prefix="/salons", tags=["Salons"])


def get_salon_service(db: Session = Depends(get_db)) -> SalonService:
    """Dependency injection for SalonService"""
    return SalonService(db)


# ============================================================================
# PUBLIC ENDPOINTS
# ============================================================================


@router.get("/public/{slug}", response_model=PublicSalonResponse)
async def get_public_salon_by_slug(
    slug: str,
    service: SalonService = Depends(get_salon_service),
):
    """Public booking page data for a salon slug"""
    return service.get_public_data(slug=slug)


@router.get("/{salon_id}/public", response_model=PublicSalonResponse)
async def get_public_salon(
    salon_id: str,
    service: SalonService = Depends(get_salon_service),
):
    """Public booking page data for a salon id"""
    return service.get_public_data(salon_id=salon_id)


# ============================================================================
# PROFESSIONALS
# ============================================================================


@router.get(
    "/{salon_id}/professionals/{professional_id}/appointments",
    response_model=list[AgendaAppointment],
)
async def get_professional_agenda(
    salon_id: str,
    professional_id: str,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    status: Optional[str] = None,
    service: SalonService = Depends(get_salon_service),
):
    """Get a professional's appointments, newest first"""
    return service.get_professional_agenda(salon_id, professional_id, start_date, end_date, status)


@router.post(
    "/{salon_id}/professionals/{professional_id}/deactivate",
    response_model=ProfessionalResponse,
)
async def deactivate_professional(
    salon_id: str,
    professional_id: str,
    service: SalonService = Depends(get_salon_service),
):
    """Soft delete a professional"""
    return service.deactivate_professional(salon_id, professional_id)
