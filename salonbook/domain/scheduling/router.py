"""Scheduling router - Public availability endpoint"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .availability_service import AvailabilityService
from .schemas import AvailabilityResponse

router = APIRouter(prefix="/salons", tags=["Scheduling"])


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Dependency injection for AvailabilityService"""
    return AvailabilityService(db)


@router.get(
    "/{salon_id}/professionals/{professional_id}/availability",
    response_model=AvailabilityResponse,
)
async def get_availability(
    salon_id: str,
    professional_id: str,
    date: str = Query(..., description="YYYY-MM-DD, today or later"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Bookable slots for a professional on a date, each flagged as booked or free"""
    return service.get_availability(salon_id, professional_id, date)
