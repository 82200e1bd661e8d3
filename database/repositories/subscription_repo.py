import asyncpg
import logging
from typing import Optional, Union
from uuid import UUID

from models import Subscription
from database.converters import subscription_from_row
from database.exceptions import QueryError

logger = logging.getLogger(__name__)


class SubscriptionRepositoryDB:
    """Async reads for the billing subscriptions mirrored from the payment provider."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_subscription(self, user_id: Union[str, UUID]) -> Optional[Subscription]:
        """The user's subscription, or None if they never subscribed."""
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """SELECT status, subscription_id, cancel_at_period_end, current_period_end
                       FROM public.customer_subscriptions
                       WHERE user_id = $1""",
                    UUID(str(user_id)),
                )
        except asyncpg.PostgresError as exc:
            logger.error("Failed to load subscription for user %s: %s", user_id, exc)
            raise QueryError(f"Could not load subscription for user {user_id}") from exc
        return subscription_from_row(row) if row else None
