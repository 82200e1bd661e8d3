"""
Milestone timeline: the dated first time each counting threshold was crossed.

Rounds are scanned oldest first; the finished timeline is returned most
recent first.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Sequence, Set

from models.milestone import Milestone, MilestoneType
from models.round import Round, sorted_by_date

from .stableford import round_stableford

BIRDIE_MILESTONES = (1, 5, 10, 25, 50, 100, 250, 500)
EAGLE_MILESTONES = (1, 5, 10, 25, 50)
ROUND_MILESTONES = (1, 5, 10, 25, 50, 100, 250, 500)
COURSE_MILESTONES = (1, 5, 10, 25, 50, 100)
SCORE_MILESTONES = (120, 110, 100, 90, 80, 70)
STABLEFORD_MILESTONES = (20, 25, 30, 32, 34, 36, 38, 40)

_EPOCH = dt.date.min

MILESTONE_LABELS = {
    MilestoneType.BIRDIE: "Birdies",
    MilestoneType.EAGLE: "Eagles",
    MilestoneType.HOLE_IN_ONE: "Hole-in-Ones",
    MilestoneType.ROUND: "Rounds Played",
    MilestoneType.COURSE: "Courses Played",
    MilestoneType.HANDICAP: "Handicap Updates",
    MilestoneType.SCORE: "Score Breakthroughs",
    MilestoneType.BEST_ROUND: "Personal Bests",
    MilestoneType.STABLEFORD: "Stableford",
}


def ordinal(n: int) -> str:
    """1 -> '1st', 12 -> '12th', 22 -> '22nd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _hole_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    # A hole under par counts as a birdie here even when it was an eagle or better.
    # Aces are not counted as eagles; every ace gets its own milestone.
    milestones: List[Milestone] = []
    birdies = 0
    eagles = 0
    aces = 0
    for round_obj in rounds:
        for hole in round_obj.holes:
            to_par = hole.to_par()
            if hole.strokes == 1:
                aces += 1
                milestones.append(
                    Milestone(
                        id=f"hole-in-one-{aces}",
                        type=MilestoneType.HOLE_IN_ONE,
                        title="First Hole-in-One!" if aces == 1 else f"Hole-in-One #{aces}",
                        description="Scored an ace!",
                        date=round_obj.date,
                        value=aces,
                    )
                )
            if to_par <= -1:
                birdies += 1
                if birdies in BIRDIE_MILESTONES:
                    milestones.append(
                        Milestone(
                            id=f"birdie-{birdies}",
                            type=MilestoneType.BIRDIE,
                            title="First Birdie" if birdies == 1 else f"{ordinal(birdies)} Birdie",
                            description=(
                                "Scored your first birdie!" if birdies == 1
                                else f"Reached {birdies} career birdies"
                            ),
                            date=round_obj.date,
                            value=birdies,
                        )
                    )
            if to_par <= -2 and hole.strokes != 1:
                eagles += 1
                if eagles in EAGLE_MILESTONES:
                    milestones.append(
                        Milestone(
                            id=f"eagle-{eagles}",
                            type=MilestoneType.EAGLE,
                            title="First Eagle" if eagles == 1 else f"{ordinal(eagles)} Eagle",
                            description=(
                                "Scored your first eagle!" if eagles == 1
                                else f"Reached {eagles} career eagles"
                            ),
                            date=round_obj.date,
                            value=eagles,
                        )
                    )
    return milestones


def _round_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    milestones: List[Milestone] = []
    for number, round_obj in enumerate(rounds, start=1):
        if number not in ROUND_MILESTONES:
            continue
        milestones.append(
            Milestone(
                id=f"round-{number}",
                type=MilestoneType.ROUND,
                title="First Round" if number == 1 else f"{ordinal(number)} Round",
                description="Logged your first round!" if number == 1 else f"Completed {number} rounds",
                date=round_obj.date,
                value=number,
            )
        )
    return milestones


def _course_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    milestones: List[Milestone] = []
    seen: Set[str] = set()
    for round_obj in rounds:
        key = round_obj.course_key
        if key is None or key in seen:
            continue
        seen.add(key)
        count = len(seen)
        if count not in COURSE_MILESTONES:
            continue
        milestones.append(
            Milestone(
                id=f"course-{count}",
                type=MilestoneType.COURSE,
                title="First Course" if count == 1 else f"{ordinal(count)} Course",
                description=(
                    "Played your first course!" if count == 1
                    else f"Played {count} different courses"
                ),
                date=round_obj.date,
                value=count,
            )
        )
    return milestones


def _score_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    # Every threshold is checked on its own, so one round can break several.
    milestones: List[Milestone] = []
    broken: Set[int] = set()
    for round_obj in rounds:
        if not (round_obj.is_full_round() and round_obj.is_qualifying()):
            continue
        for threshold in SCORE_MILESTONES:
            if threshold in broken or round_obj.gross_score >= threshold:
                continue
            broken.add(threshold)
            milestones.append(
                Milestone(
                    id=f"score-{threshold}",
                    type=MilestoneType.SCORE,
                    title=f"Broke {threshold}",
                    description=f"Shot {round_obj.gross_score} - under {threshold} for the first time!",
                    date=round_obj.date,
                    value=round_obj.gross_score,
                )
            )
    return milestones


def _best_round_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    milestones: List[Milestone] = []
    best = None
    for index, round_obj in enumerate(rounds):
        if not (round_obj.is_full_round() and round_obj.is_qualifying()):
            continue
        if best is not None and round_obj.gross_score >= best:
            continue
        best = round_obj.gross_score
        # The very first round is already covered by the round milestones.
        if index == 0:
            continue
        milestones.append(
            Milestone(
                id=f"best-round-{best}-{round_obj.date}",
                type=MilestoneType.BEST_ROUND,
                title="New Personal Best",
                description=f"Shot {best} - your best round yet!",
                date=round_obj.date,
                value=best,
            )
        )
    return milestones


def _stableford_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    milestones: List[Milestone] = []
    reached: Set[int] = set()
    for round_obj in rounds:
        points = round_stableford(round_obj)
        if not points:
            continue
        for threshold in STABLEFORD_MILESTONES:
            if threshold in reached or points < threshold:
                continue
            reached.add(threshold)
            milestones.append(
                Milestone(
                    id=f"stableford-{threshold}",
                    type=MilestoneType.STABLEFORD,
                    title=f"{threshold} Stableford Points",
                    description=f"Scored {points} points - reached {threshold}+ for the first time!",
                    date=round_obj.date,
                    value=points,
                )
            )
    return milestones


def _handicap_milestones(rounds: Sequence[Round]) -> List[Milestone]:
    milestones: List[Milestone] = []
    previous = None
    for round_obj in rounds:
        handicap = round_obj.handicap_at_posting
        if handicap is None:
            continue
        if previous is None:
            milestones.append(
                Milestone(
                    id=f"handicap-first-{round_obj.date}",
                    type=MilestoneType.HANDICAP,
                    title="First Handicap",
                    description=f"Starting handicap: {handicap:.1f}",
                    date=round_obj.date,
                    value=handicap,
                )
            )
        elif handicap < previous:
            milestones.append(
                Milestone(
                    id=f"handicap-improved-{round_obj.date}-{handicap}",
                    type=MilestoneType.HANDICAP,
                    title="Handicap Improved",
                    description=f"Dropped to {handicap:.1f} (improved by {previous - handicap:.1f})",
                    date=round_obj.date,
                    value=handicap,
                )
            )
        previous = handicap
    return milestones


def calculate_milestones(rounds: Iterable[Round]) -> List[Milestone]:
    """All milestones reached so far, most recent first."""
    chronological = sorted_by_date(rounds)
    if not chronological:
        return []

    milestones: List[Milestone] = []
    milestones.extend(_hole_milestones(chronological))
    milestones.extend(_round_milestones(chronological))
    milestones.extend(_course_milestones(chronological))
    milestones.extend(_score_milestones(chronological))
    milestones.extend(_best_round_milestones(chronological))
    milestones.extend(_stableford_milestones(chronological))
    milestones.extend(_handicap_milestones(chronological))

    # sorted() is stable with reverse=True, so same-day milestones keep scan order.
    return sorted(milestones, key=lambda m: m.date or _EPOCH, reverse=True)


def get_recent_milestones(rounds: Iterable[Round], limit: int = 3) -> List[Milestone]:
    return calculate_milestones(rounds)[:limit]


def milestones_by_type(rounds: Iterable[Round]) -> Dict[MilestoneType, List[Milestone]]:
    """Timeline grouped by milestone type; every type is present, possibly empty."""
    grouped: Dict[MilestoneType, List[Milestone]] = {t: [] for t in MilestoneType}
    for milestone in calculate_milestones(rounds):
        grouped[milestone.type].append(milestone)
    return grouped


def milestone_label(milestone_type: MilestoneType) -> str:
    return MILESTONE_LABELS.get(milestone_type, "Other")
