"""Read access to a golfer's posted rounds."""

import asyncpg
import logging
from typing import List, Optional, Union
from uuid import UUID

from models import Round
from database.converters import round_from_row
from database.exceptions import QueryError

logger = logging.getLogger(__name__)

ROUND_COLUMNS = """
    r.id, r.date, r.tee_name, r.gross_score, r.net_score,
    r.to_par_gross, r.to_par_net, r.handicap_at_posting,
    r.holes_played, r.hole_scores, r.course_id,
    r.stableford_gross, r.stableford_net,
    c.name AS course_name, c.city AS course_city, c.state AS course_state
"""


class RoundRepositoryDB:
    """Async reads for rounds and their embedded course metadata."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_rounds_for_user(
        self, user_id: Union[str, UUID], *, limit: Optional[int] = None
    ) -> List[Round]:
        """Get a user's rounds, most recent first."""
        query = f"""SELECT {ROUND_COLUMNS}
                    FROM public.rounds r
                    LEFT JOIN public.courses c ON c.id = r.course_id
                    WHERE r.user_id = $1
                    ORDER BY r.date DESC, r.id DESC"""
        args = [UUID(str(user_id))]
        if limit is not None:
            query += " LIMIT $2"
            args.append(limit)

        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(query, *args)
        except asyncpg.PostgresError as exc:
            logger.error("Failed to load rounds for user %s: %s", user_id, exc)
            raise QueryError(f"Could not load rounds for user {user_id}") from exc
        return [round_from_row(row) for row in rows]

    async def count_rounds_for_user(self, user_id: Union[str, UUID]) -> int:
        """Number of rounds a user has posted."""
        try:
            async with self._pool.acquire() as conn:
                count = await conn.fetchval(
                    "SELECT COUNT(*) FROM public.rounds WHERE user_id = $1",
                    UUID(str(user_id)),
                )
        except asyncpg.PostgresError as exc:
            logger.error("Failed to count rounds for user %s: %s", user_id, exc)
            raise QueryError(f"Could not count rounds for user {user_id}") from exc
        return count or 0
