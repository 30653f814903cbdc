"""Billing repository - Subscription lookups"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Subscription


class BillingRepository:
    """Repository for billing database operations"""

    @staticmethod
    def get_subscription_by_user_id(db: Session, user_id: str) -> Optional[Subscription]:
        """Get the subscription of a salon owner"""
        return db.query(Subscription).filter(Subscription.user_id == user_id).first()
