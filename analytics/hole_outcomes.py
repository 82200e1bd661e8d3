from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from models.round import Round
from models.stats import HoleOutcomeTally

PERIODS = ("month", "year", "all")

# to-par -> tally field; anything not listed (and better than -2) is handled below
OUTCOME_BY_TO_PAR = {
    -1: "birdies",
    0: "pars",
    1: "bogeys",
    2: "double_bogeys",
}


def outcome_for_to_par(to_par: int) -> str:
    """Tally bucket for a hole played `to_par` strokes relative to par."""
    if to_par <= -2:
        return "eagles"
    return OUTCOME_BY_TO_PAR.get(to_par, "others")


def calculate_hole_outcomes(rounds: Iterable[Round]) -> HoleOutcomeTally:
    """
    Count eagles (or better), birdies, pars, bogeys, doubles and everything else.

    Only usable hole entries are counted; rounds whose hole scores were
    missing or unreadable contribute nothing.
    """
    counts = {
        "eagles": 0,
        "birdies": 0,
        "pars": 0,
        "bogeys": 0,
        "double_bogeys": 0,
        "others": 0,
    }
    total = 0
    for round_obj in rounds:
        for hole_score in round_obj.holes:
            counts[outcome_for_to_par(hole_score.to_par())] += 1
            total += 1

    return HoleOutcomeTally(total_holes=total, **counts)


def filter_rounds_by_period(
    rounds: Iterable[Round],
    period: str = "all",
    reference: Optional[dt.date] = None,
) -> List[Round]:
    """Rounds played in the same month or year as `reference` (today by default)."""
    if period not in PERIODS:
        raise ValueError(f"Unknown period '{period}', expected one of {', '.join(PERIODS)}")

    rounds = list(rounds)
    if period == "all":
        return rounds

    reference = reference or dt.date.today()
    selected = []
    for round_obj in rounds:
        if round_obj.date is None or round_obj.date.year != reference.year:
            continue
        if period == "month" and round_obj.date.month != reference.month:
            continue
        selected.append(round_obj)
    return selected
