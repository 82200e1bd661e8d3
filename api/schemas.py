"""API-specific request and response models for the stats endpoints."""

from pydantic import BaseModel, Field
from typing import List, Optional

from models import (
    Achievement,
    AchievementSummary,
    CourseStats,
    HoleOutcomeTally,
    Milestone,
    PotentialBestScore,
    Round,
    Stats,
)


class CalculateRequest(BaseModel):
    """Rounds supplied by the caller instead of loaded from the round store."""
    rounds: List[Round] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    """Everything the dashboard header and stat cards need in one payload."""
    stats: Stats
    hole_outcomes: HoleOutcomeTally
    recent_milestones: List[Milestone]
    achievements: AchievementSummary


class AchievementsResponse(BaseModel):
    summary: AchievementSummary
    achievements: List[Achievement]


class CourseStatsResponse(BaseModel):
    handicap_index: float
    courses: List[CourseStats]


class CourseDetailResponse(BaseModel):
    """One course's stats plus the hole-by-hole potential best."""
    course: CourseStats
    potential_best: Optional[PotentialBestScore] = None
