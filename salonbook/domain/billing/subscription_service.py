"""Subscription service - Entitlement lookups for salon owners"""

import logging

from sqlalchemy.orm import Session

from .repository import BillingRepository

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "active"
FREE_PLAN = "free"
PAID_PLAN = "pro"


class SubscriptionService:
    """Read-only view of the billing provider's subscription state.

    Only status == "active" grants entitlement; past_due, canceled and
    missing subscriptions all count as inactive.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = BillingRepository()

    def is_active(self, owner_id: str) -> bool:
        subscription = self.repo.get_subscription_by_user_id(self.db, owner_id)
        return subscription is not None and subscription.status == ACTIVE_STATUS

    def get_status(self, owner_id: str) -> dict:
        """Subscription summary used by the public page and the admin gate"""
        subscription = self.repo.get_subscription_by_user_id(self.db, owner_id)
        if not subscription:
            logger.info(f"ℹ️ No subscription found for owner {owner_id}")
            return {"isActive": False, "status": "inactive", "plan": FREE_PLAN, "expiresAt": None}

        is_active = subscription.status == ACTIVE_STATUS
        return {
            "isActive": is_active,
            "status": subscription.status,
            "plan": (subscription.plan or PAID_PLAN) if is_active else FREE_PLAN,
            "expiresAt": subscription.current_period_end,
        }
