"""Billing router - Subscription status endpoint"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import SubscriptionStatusResponse
from .subscription_service import SubscriptionService

router = APIRouter(prefix="/billing", tags=["Billing"])


def get_subscription_service(db: Session = Depends(get_db)) -> SubscriptionService:
    """Dependency injection for SubscriptionService"""
    return SubscriptionService(db)


@router.get("/subscription-status/{owner_id}", response_model=SubscriptionStatusResponse)
async def get_subscription_status(
    owner_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Get the subscription status of a salon owner"""
    return service.get_status(owner_id)
