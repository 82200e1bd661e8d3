"""User account endpoints backed by the round store."""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies import get_app_settings, get_db
from config import Settings
from database.db_manager import DatabaseManager
from models import AccessStatus, evaluate_access

router = APIRouter()


@router.get("/{user_id}/access", response_model=AccessStatus)
async def get_access(
    user_id: UUID,
    db: DatabaseManager = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Whether the user may log another round under the free-tier limit."""
    subscription = await db.subscriptions.get_subscription(user_id)
    round_count = await db.rounds.count_rounds_for_user(user_id)
    return evaluate_access(subscription, round_count, limit=settings.free_round_limit)
