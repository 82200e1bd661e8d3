"""Achievement badges derived from a golfer's round history."""

from __future__ import annotations

import datetime as dt
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from models.achievement import (
    Achievement,
    AchievementCategory,
    AchievementDefinition,
    AchievementSummary,
)
from models.hole_score import HoleScore
from models.round import Round, sorted_by_date

from .handicap import round_half_up

SCORING = AchievementCategory.SCORING
MILESTONES = AchievementCategory.MILESTONES
COURSES = AchievementCategory.COURSES
CONSISTENCY = AchievementCategory.CONSISTENCY

ACHIEVEMENT_CATALOG: Tuple[AchievementDefinition, ...] = (
    AchievementDefinition(id="first_birdie", name="First Birdie", description="Score 1 under par on a hole", icon="🐦", category=SCORING),
    AchievementDefinition(id="first_eagle", name="Eagle Eye", description="Score 2 under par on a hole", icon="🦅", category=SCORING),
    AchievementDefinition(id="first_par", name="Level Player", description="Score par on a hole", icon="⛳", category=SCORING),
    AchievementDefinition(id="broke_120", name="Breaking Through", description="Score under 120 (18 holes)", icon="🎯", category=MILESTONES),
    AchievementDefinition(id="broke_110", name="Getting Serious", description="Score under 110 (18 holes)", icon="💪", category=MILESTONES),
    AchievementDefinition(id="broke_100", name="Double Digits", description="Score under 100 (18 holes)", icon="💯", category=MILESTONES),
    AchievementDefinition(id="broke_90", name="Single Handicapper Territory", description="Score under 90 (18 holes)", icon="🏆", category=MILESTONES),
    AchievementDefinition(id="broke_80", name="Scratch Golfer", description="Score under 80 (18 holes)", icon="👑", category=MILESTONES),
    AchievementDefinition(id="courses_3", name="Course Explorer", description="Play 3 different courses", icon="🗺️", category=COURSES),
    AchievementDefinition(id="courses_5", name="Course Hopper", description="Play 5 different courses", icon="🌍", category=COURSES),
    AchievementDefinition(id="courses_10", name="Course Collector", description="Play 10 different courses", icon="🏌️", category=COURSES),
    AchievementDefinition(id="rounds_5", name="Getting Started", description="Complete 5 rounds", icon="🌱", category=CONSISTENCY),
    AchievementDefinition(id="rounds_10", name="Committed Golfer", description="Complete 10 rounds", icon="📈", category=CONSISTENCY),
    AchievementDefinition(id="rounds_25", name="Dedicated Player", description="Complete 25 rounds", icon="⭐", category=CONSISTENCY),
    AchievementDefinition(id="rounds_50", name="Golf Enthusiast", description="Complete 50 rounds", icon="🔥", category=CONSISTENCY),
)

# achievement id -> strokes relative to par that earns it
HOLE_ACHIEVEMENTS: Dict[str, int] = {
    "first_birdie": -1,
    "first_eagle": -2,
    "first_par": 0,
}

SCORE_ACHIEVEMENTS: Dict[str, int] = {
    "broke_120": 120,
    "broke_110": 110,
    "broke_100": 100,
    "broke_90": 90,
    "broke_80": 80,
}

COURSE_ACHIEVEMENTS: Dict[str, int] = {
    "courses_3": 3,
    "courses_5": 5,
    "courses_10": 10,
}

ROUND_ACHIEVEMENTS: Dict[str, int] = {
    "rounds_5": 5,
    "rounds_10": 10,
    "rounds_25": 25,
    "rounds_50": 50,
}


def default_achievements() -> List[Achievement]:
    """The whole catalog, all locked."""
    return [Achievement.from_definition(d) for d in ACHIEVEMENT_CATALOG]


def _first_hole_date(
    rounds: Sequence[Round], condition: Callable[[HoleScore], bool]
) -> Tuple[bool, Optional[dt.date]]:
    for round_obj in rounds:
        if any(condition(hole) for hole in round_obj.holes):
            return True, round_obj.date
    return False, None


def calculate_achievements(rounds: Iterable[Round]) -> List[Achievement]:
    """
    Unlock state for every catalog entry.

    Hole and score achievements carry the date of the first round that
    earned them (rounds are scanned oldest first). Course and round count
    achievements carry no date. Only 18-hole rounds count toward the
    score thresholds.
    """
    chronological = sorted_by_date(rounds)
    if not chronological:
        return default_achievements()

    full_rounds = [r for r in chronological if r.is_full_round() and r.is_qualifying()]
    unique_courses = {r.course_key for r in chronological if r.course_key}

    achievements: List[Achievement] = []
    for definition in ACHIEVEMENT_CATALOG:
        unlocked = False
        unlocked_date: Optional[dt.date] = None

        if definition.id in HOLE_ACHIEVEMENTS:
            target = HOLE_ACHIEVEMENTS[definition.id]
            unlocked, unlocked_date = _first_hole_date(
                chronological, lambda hole, target=target: hole.to_par() == target
            )
        elif definition.id in SCORE_ACHIEVEMENTS:
            threshold = SCORE_ACHIEVEMENTS[definition.id]
            earned = next((r for r in full_rounds if r.gross_score < threshold), None)
            unlocked = earned is not None
            unlocked_date = earned.date if earned else None
        elif definition.id in COURSE_ACHIEVEMENTS:
            unlocked = len(unique_courses) >= COURSE_ACHIEVEMENTS[definition.id]
        elif definition.id in ROUND_ACHIEVEMENTS:
            unlocked = len(chronological) >= ROUND_ACHIEVEMENTS[definition.id]

        achievements.append(
            Achievement.from_definition(definition, unlocked=unlocked, unlocked_date=unlocked_date)
        )
    return achievements


def achievement_summary(achievements: Sequence[Achievement]) -> AchievementSummary:
    total = len(achievements)
    unlocked = sum(1 for a in achievements if a.unlocked)
    percentage = round_half_up(unlocked / total * 100) if total else 0
    return AchievementSummary(total=total, unlocked=unlocked, percentage=percentage)
