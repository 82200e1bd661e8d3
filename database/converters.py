"""Conversion from asyncpg rows to Pydantic domain models.

Round rows arrive joined with their course; the course columns are prefixed
with `course_`. `hole_scores` is JSONB and comes back from asyncpg as text,
which the Round model normalizes.
"""

from typing import Optional

from models import CourseRef, Round, Subscription


def course_from_row(row) -> Optional[CourseRef]:
    """Joined courses columns -> CourseRef (None for rounds without a course)."""
    if row["course_id"] is None:
        return None
    return CourseRef(
        id=row["course_id"],
        name=row["course_name"],
        city=row["course_city"],
        state=row["course_state"],
    )


def round_from_row(row) -> Round:
    """rounds row (+ joined course) -> Round model."""
    return Round(
        id=row["id"],
        date=row["date"],
        tee_name=row["tee_name"],
        gross_score=row["gross_score"],
        to_par_gross=row["to_par_gross"],
        net_score=row["net_score"],
        to_par_net=row["to_par_net"],
        handicap_at_posting=row["handicap_at_posting"],
        holes_played=row["holes_played"],
        stableford_gross=row["stableford_gross"],
        stableford_net=row["stableford_net"],
        hole_scores=row["hole_scores"],
        course_id=row["course_id"],
        course=course_from_row(row),
    )


def subscription_from_row(row) -> Subscription:
    """customer_subscriptions row -> Subscription model."""
    return Subscription(
        status=row["status"],
        subscription_id=row["subscription_id"],
        cancel_at_period_end=bool(row["cancel_at_period_end"]),
        current_period_end=row["current_period_end"],
    )
