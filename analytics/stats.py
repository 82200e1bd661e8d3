from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from models.course import UNKNOWN_CLUB, UNKNOWN_COURSE
from models.round import Round, sorted_by_date
from models.stats import CourseStats, Stats

from .stableford import round_stableford
from .handicap import (
    ROUNDS_NEEDED_FOR_HANDICAP,
    handicap_index_for_rounds,
    net_score,
    net_to_par,
    qualifying_rounds,
    rounds_needed_for_handicap,
)


def _best_scores(rounds: Sequence[Round], handicap_index: float) -> Dict[str, Optional[int]]:
    """Best gross/net and to-par/net-to-par over a non-empty group of rounds."""
    net_scores = []
    net_to_pars = []
    for round_obj in rounds:
        handicap = round_obj.handicap_used(handicap_index)
        net_scores.append(net_score(round_obj.gross_score, handicap))
        net_to_pars.append(net_to_par(round_obj.to_par_gross, handicap))

    return {
        "best_gross_score": min(r.gross_score for r in rounds),
        "best_net_score": min(net_scores),
        "best_to_par": min(r.to_par_gross for r in rounds),
        "best_to_par_net": min(net_to_pars),
    }


def _average_gross(rounds: Sequence[Round]) -> float:
    return sum(r.gross_score for r in rounds) / len(rounds)


def _stableford_scores(rounds: Sequence[Round]) -> Dict[str, Any]:
    """Best and average gross Stableford over the rounds that have points."""
    points = [round_stableford(r) for r in rounds]
    points = [p for p in points if p is not None]
    if not points:
        return {}
    return {
        "best_stableford": max(points),
        "average_stableford": sum(points) / len(points),
    }


def calculate_stats(rounds: Iterable[Round]) -> Stats:
    """
    Overall stats for a golfer's rounds.

    Net figures use each round's posting-time handicap when it has one and
    the freshly computed index otherwise. An empty history gives zeroes and
    no net bests.
    """
    rounds = list(rounds)
    if not rounds:
        return Stats(rounds_needed_for_handicap=ROUNDS_NEEDED_FOR_HANDICAP)

    qualifying_count = len(qualifying_rounds(rounds))
    handicap_index = handicap_index_for_rounds(rounds)

    return Stats(
        total_rounds=len(rounds),
        average_score=_average_gross(rounds),
        handicap_index=handicap_index,
        rounds_needed_for_handicap=rounds_needed_for_handicap(qualifying_count),
        **_best_scores(rounds, handicap_index),
        **_stableford_scores(rounds),
    )


def group_rounds_by_course(rounds: Iterable[Round]) -> Dict[str, List[Round]]:
    """Rounds keyed by course, in first-played order. Rounds with no course are dropped."""
    groups: Dict[str, List[Round]] = {}
    for round_obj in rounds:
        key = round_obj.course_key
        if key is None:
            continue
        groups.setdefault(key, []).append(round_obj)
    return groups


def calculate_course_stats(
    rounds: Iterable[Round],
    handicap_index: Optional[float] = None,
) -> List[CourseStats]:
    """
    Best and average scores per course.

    `handicap_index` is the golfer's overall index; it is computed from all
    rounds when not supplied. It is shared across courses, not recomputed
    per course.
    """
    rounds = list(rounds)
    if not rounds:
        return []
    if handicap_index is None:
        handicap_index = calculate_stats(rounds).handicap_index

    results: List[CourseStats] = []
    for course_id, course_rounds in group_rounds_by_course(rounds).items():
        course = next((r.course for r in course_rounds if r.course), None)
        if course:
            club_name, course_name = course.display_names()
        else:
            club_name, course_name = UNKNOWN_CLUB, UNKNOWN_COURSE

        results.append(
            CourseStats(
                course_id=course_id,
                course_name=course_name,
                club_name=club_name,
                city=course.city if course else None,
                state=course.state if course else None,
                rounds_played=len(course_rounds),
                average_score=_average_gross(course_rounds),
                **_best_scores(course_rounds, handicap_index),
            )
        )
    return results


def score_progression(rounds: Iterable[Round]) -> List[Dict[str, Any]]:
    """
    Oldest-first score history with the handicap index as it stood after each round.

    Output rows:
    - round_index: 1-based position in date order
    - round_id, date, gross_score, to_par
    - stableford: gross Stableford points, None without hole detail or a stored total
    - handicap_index: index over this and all earlier rounds (0 until established)
    """
    chronological = sorted_by_date(rounds)
    results: List[Dict[str, Any]] = []
    for index, round_obj in enumerate(chronological, start=1):
        results.append(
            {
                "round_index": index,
                "round_id": round_obj.id,
                "date": round_obj.date,
                "gross_score": round_obj.gross_score,
                "to_par": round_obj.to_par_gross,
                "stableford": round_stableford(round_obj),
                "handicap_index": handicap_index_for_rounds(chronological[:index]),
            }
        )
    return results
