"""
Stableford scoring.

Points per hole by strokes relative to par: albatross or better 5, eagle 4,
birdie 3, par 2, bogey 1, double bogey or worse 0. Net points first take the
golfer's handicap strokes off each hole, allocated by stroke index.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from models.hole_score import HoleScore
from models.round import Round

logger = logging.getLogger(__name__)

# to-par -> points; better than -3 is capped at the albatross value
POINTS_BY_TO_PAR = {
    -3: 5,
    -2: 4,
    -1: 3,
    0: 2,
    1: 1,
}


def hole_points(strokes: int, par: int) -> int:
    to_par = strokes - par
    if to_par <= -3:
        return POINTS_BY_TO_PAR[-3]
    return POINTS_BY_TO_PAR.get(to_par, 0)


def handicap_strokes_for_hole(stroke_index: int, course_handicap: int) -> int:
    """
    Strokes received on a hole.

    One stroke on every hole whose index is within the course handicap, and a
    second on the hardest (course_handicap - 18) holes once it passes 18.
    """
    if course_handicap <= 0 or stroke_index <= 0:
        return 0

    strokes = 1 if stroke_index <= course_handicap else 0
    if course_handicap > 18 and stroke_index <= course_handicap - 18:
        strokes += 1
    return strokes


def _stroke_index(hole: HoleScore) -> int:
    # Without a stroke index the hole number stands in for it.
    if hole.stroke_index is not None:
        return hole.stroke_index
    return hole.hole_number or 0


def net_hole_points(hole: HoleScore, course_handicap: int) -> int:
    received = handicap_strokes_for_hole(_stroke_index(hole), course_handicap)
    return hole_points(hole.strokes - received, hole.par)


def gross_stableford(holes: Iterable[HoleScore]) -> int:
    return sum(hole_points(h.strokes, h.par) for h in holes)


def net_stableford(holes: Iterable[HoleScore], course_handicap: Optional[int]) -> int:
    """Net points for a round; a missing or non-positive handicap gives the gross total."""
    holes = list(holes)
    if not course_handicap or course_handicap <= 0:
        return gross_stableford(holes)
    return sum(net_hole_points(h, course_handicap) for h in holes)


def points_per_hole(
    holes: Iterable[HoleScore], course_handicap: Optional[int] = None
) -> List[Dict[str, int]]:
    """Gross and net points for each hole, in input order."""
    results = []
    for hole in holes:
        gross = hole_points(hole.strokes, hole.par)
        net = gross
        if course_handicap and course_handicap > 0:
            net = net_hole_points(hole, course_handicap)
        results.append({"hole": hole.hole_number, "gross": gross, "net": net})
    return results


def round_stableford(round_obj: Round) -> Optional[int]:
    """
    Gross Stableford points for a round.

    A stored total wins. Otherwise points come from the recorded holes, and a
    round without usable holes has no Stableford score.
    """
    if round_obj.stableford_gross is not None:
        return round_obj.stableford_gross
    if not round_obj.holes:
        return None
    return gross_stableford(round_obj.holes)


def round_net_stableford(round_obj: Round, course_handicap: Optional[int]) -> Optional[int]:
    if round_obj.stableford_net is not None:
        return round_obj.stableford_net
    if not round_obj.holes:
        return None
    points = net_stableford(round_obj.holes, course_handicap)
    logger.debug("Net Stableford for round %s at handicap %s: %d",
                 round_obj.id, course_handicap, points)
    return points
