from datetime import datetime, timezone
from pydantic import BaseModel, Field
from typing import Optional

FREE_ROUND_LIMIT = 4

VALID_STATUSES = {"active", "trialing", "paid"}
GRACE_STATUSES = {"incomplete", "past_due"}


class Subscription(BaseModel):
    """A golfer's billing subscription as mirrored from the payment provider."""
    status: Optional[str] = None
    subscription_id: Optional[str] = None
    cancel_at_period_end: bool = False
    current_period_end: Optional[datetime] = None

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        """
        Whether the subscription currently grants paid access.

        A paid period that has not ended yet also counts when the subscription
        is set to cancel, or when the provider reports it as incomplete or
        past due.
        """
        if self.status in VALID_STATUSES:
            return True

        if self.current_period_end is None:
            return False
        now = now or datetime.now(timezone.utc)
        period_end = self.current_period_end
        if period_end.tzinfo is None:
            period_end = period_end.replace(tzinfo=timezone.utc)
        if period_end <= now:
            return False

        return self.cancel_at_period_end or self.status in GRACE_STATUSES


class AccessStatus(BaseModel):
    can_add: bool
    has_subscription: bool
    round_count: int = 0
    remaining_rounds: Optional[int] = Field(None, description="None means unlimited")


def remaining_free_rounds(
    round_count: int, has_subscription: bool, limit: int = FREE_ROUND_LIMIT
) -> Optional[int]:
    """Rounds left on the free tier. None when a subscription lifts the limit."""
    if has_subscription:
        return None
    return max(0, limit - round_count)


def evaluate_access(
    subscription: Optional[Subscription],
    round_count: int,
    limit: int = FREE_ROUND_LIMIT,
    now: Optional[datetime] = None,
) -> AccessStatus:
    """Decide whether a golfer may log another round."""
    has_subscription = subscription is not None and subscription.is_valid(now)
    if has_subscription:
        return AccessStatus(can_add=True, has_subscription=True, round_count=round_count)

    return AccessStatus(
        can_add=round_count < limit,
        has_subscription=False,
        round_count=round_count,
        remaining_rounds=remaining_free_rounds(round_count, False, limit),
    )
