"""Billing domain schemas - Pydantic models for subscription status"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SubscriptionStatusResponse(BaseModel):
    """Entitlement view of a salon owner's subscription"""

    isActive: bool
    status: str
    plan: str
    expiresAt: Optional[datetime] = None
