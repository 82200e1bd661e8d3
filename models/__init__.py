from .base import BaseGolfModel
from .achievement import Achievement, AchievementCategory, AchievementDefinition, AchievementSummary
from .course import CourseRef, format_course_name, parse_course_name
from .hole_score import HoleScore, HoleScoreSet, HoleScoreStatus, parse_hole_scores
from .milestone import Milestone, MilestoneType
from .round import Round, sorted_by_date
from .stats import CourseStats, HoleBestScore, HoleOutcomeTally, PotentialBestScore, Stats
from .subscription import AccessStatus, Subscription, evaluate_access, remaining_free_rounds

__all__ = [
    "BaseGolfModel",
    "Achievement",
    "AchievementCategory",
    "AchievementDefinition",
    "AchievementSummary",
    "CourseRef",
    "format_course_name",
    "parse_course_name",
    "HoleScore",
    "HoleScoreSet",
    "HoleScoreStatus",
    "parse_hole_scores",
    "Milestone",
    "MilestoneType",
    "Round",
    "sorted_by_date",
    "CourseStats",
    "HoleBestScore",
    "HoleOutcomeTally",
    "PotentialBestScore",
    "Stats",
    "AccessStatus",
    "Subscription",
    "evaluate_access",
    "remaining_free_rounds",
]
