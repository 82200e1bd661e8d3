from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from models.round import Round
from models.stats import HoleBestScore, PotentialBestScore


def calculate_potential_best_score(rounds: Iterable[Round]) -> Optional[PotentialBestScore]:
    """
    Best score ever recorded on each hole, summed into a "potential best" round.

    Meant for the rounds of a single course. Holes without a hole number are
    ignored. Returns None when there are no rounds at all.
    """
    rounds = list(rounds)
    if not rounds:
        return None

    pars: Dict[int, int] = {}
    strokes_by_hole: Dict[int, List[int]] = {}
    for round_obj in rounds:
        for hole_score in round_obj.holes:
            if hole_score.hole_number is None:
                continue
            pars.setdefault(hole_score.hole_number, hole_score.par)
            strokes_by_hole.setdefault(hole_score.hole_number, []).append(hole_score.strokes)

    hole_scores = [
        HoleBestScore(
            hole=hole,
            par=pars[hole],
            best_score=min(strokes_by_hole[hole]),
            rounds=len(strokes_by_hole[hole]),
        )
        for hole in sorted(strokes_by_hole)
    ]
    front = [h for h in hole_scores if h.hole <= 9]
    back = [h for h in hole_scores if h.hole > 9]

    return PotentialBestScore(
        hole_scores=hole_scores,
        total_par=sum(h.par for h in hole_scores),
        total_best_score=sum(h.best_score for h in hole_scores),
        front_nine_par=sum(h.par for h in front),
        front_nine_best_score=sum(h.best_score for h in front),
        back_nine_par=sum(h.par for h in back),
        back_nine_best_score=sum(h.best_score for h in back),
    )
