from __future__ import annotations

from missive.types import Snowflake

from .base import RawBaseModel


__all__ = (
    'RoleSubscriptionData',
)


class RoleSubscriptionData(RawBaseModel):
    role_subscription_listing_id: Snowflake
    tier_name: str
    total_months_subscribed: int
    is_renewal: bool
