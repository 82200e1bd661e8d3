"""Stats/dashboard API endpoints."""

from typing import List, Optional, Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from analytics.achievements import achievement_summary, calculate_achievements
from analytics.best_score import calculate_potential_best_score
from analytics.hole_outcomes import calculate_hole_outcomes, filter_rounds_by_period
from analytics.milestones import calculate_milestones, get_recent_milestones
from analytics.stats import calculate_course_stats, calculate_stats
from api.dependencies import get_db
from api.schemas import (
    AchievementsResponse,
    CalculateRequest,
    CourseDetailResponse,
    CourseStatsResponse,
    DashboardResponse,
)
from database.db_manager import DatabaseManager
from models import Milestone, Round

router = APIRouter()

PERIOD_PATTERN = "^(month|year|all)$"


def build_dashboard(rounds: Sequence[Round], period: str = "all") -> DashboardResponse:
    """Dashboard payload; `period` narrows only the hole-outcome tally."""
    return DashboardResponse(
        stats=calculate_stats(rounds),
        hole_outcomes=calculate_hole_outcomes(filter_rounds_by_period(rounds, period)),
        recent_milestones=get_recent_milestones(rounds),
        achievements=achievement_summary(calculate_achievements(rounds)),
    )


@router.get("/dashboard/{user_id}", response_model=DashboardResponse)
async def get_dashboard(
    user_id: UUID,
    period: str = Query("all", pattern=PERIOD_PATTERN),
    db: DatabaseManager = Depends(get_db),
):
    rounds = await db.rounds.get_rounds_for_user(user_id)
    return build_dashboard(rounds, period)


@router.post("/calculate", response_model=DashboardResponse)
async def calculate_from_rounds(
    request: CalculateRequest,
    period: str = Query("all", pattern=PERIOD_PATTERN),
):
    return build_dashboard(request.rounds, period)


@router.get("/courses/{user_id}", response_model=CourseStatsResponse)
async def get_course_stats(user_id: UUID, db: DatabaseManager = Depends(get_db)):
    rounds = await db.rounds.get_rounds_for_user(user_id)
    handicap_index = calculate_stats(rounds).handicap_index
    return CourseStatsResponse(
        handicap_index=handicap_index,
        courses=calculate_course_stats(rounds, handicap_index),
    )


@router.get("/courses/{user_id}/{course_id}", response_model=CourseDetailResponse)
async def get_course_detail(
    user_id: UUID, course_id: str, db: DatabaseManager = Depends(get_db)
):
    rounds = await db.rounds.get_rounds_for_user(user_id)
    handicap_index = calculate_stats(rounds).handicap_index
    course = next(
        (c for c in calculate_course_stats(rounds, handicap_index) if c.course_id == course_id),
        None,
    )
    if course is None:
        raise HTTPException(404, "No rounds found for this course")

    course_rounds = [r for r in rounds if r.course_key == course_id]
    return CourseDetailResponse(
        course=course,
        potential_best=calculate_potential_best_score(course_rounds),
    )


@router.get("/achievements/{user_id}", response_model=AchievementsResponse)
async def get_achievements(user_id: UUID, db: DatabaseManager = Depends(get_db)):
    rounds = await db.rounds.get_rounds_for_user(user_id)
    achievements = calculate_achievements(rounds)
    return AchievementsResponse(
        summary=achievement_summary(achievements),
        achievements=achievements,
    )


@router.get("/milestones/{user_id}", response_model=List[Milestone])
async def get_milestones(
    user_id: UUID,
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: DatabaseManager = Depends(get_db),
):
    rounds = await db.rounds.get_rounds_for_user(user_id)
    milestones = calculate_milestones(rounds)
    return milestones[:limit] if limit is not None else milestones
