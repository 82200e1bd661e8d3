"""
Handicap Index calculation (simplified World Handicap System).

Each qualifying round's to-par score stands in for its score differential;
course rating and slope are not modeled.
"""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal
from typing import Any, Iterable, List, Sequence

from models.base import coerce_number
from models.round import Round

logger = logging.getLogger(__name__)

MIN_HANDICAP_INDEX = 0.0
MAX_HANDICAP_INDEX = 54.0
HANDICAP_MULTIPLIER = 0.96
ROUNDS_NEEDED_FOR_HANDICAP = 5

# (minimum qualifying rounds, differentials averaged), highest first
DIFFERENTIAL_TABLE = (
    (20, 8),
    (15, 6),
    (10, 4),
    (5, 3),
)


def round_half_up(value: float, ndigits: int = 0):
    """Round halves toward +infinity: 2.5 -> 3, -2.5 -> -2, -0.5 -> 0 (never banker's rounding)."""
    shifted = Decimal(str(value)).scaleb(ndigits) + Decimal("0.5")
    rounded = shifted.to_integral_value(rounding=ROUND_FLOOR).scaleb(-ndigits)
    if ndigits <= 0:
        return int(rounded)
    return float(rounded)


def differentials_to_use(qualifying_count: int) -> int:
    """How many of the lowest differentials count toward the index."""
    for minimum, used in DIFFERENTIAL_TABLE:
        if qualifying_count >= minimum:
            return used
    return 0


def calculate_handicap_index(differentials: Sequence[float]) -> float:
    """
    Best-N average of the differentials, times 0.96.

    The result is rounded to one decimal and clamped to [0, 54]. Fewer than
    five differentials give 0.0, which callers must not confuse with a
    scratch index; check the round count as well.
    """
    count = differentials_to_use(len(differentials))
    if count == 0:
        return 0.0

    lowest = sorted(differentials)[:count]
    average = sum(lowest) / len(lowest)
    index = round_half_up(average * HANDICAP_MULTIPLIER, 1)
    logger.debug("Handicap from lowest %d of %d differentials %s -> %s",
                 count, len(differentials), lowest, index)
    return min(MAX_HANDICAP_INDEX, max(MIN_HANDICAP_INDEX, index))


def qualifying_rounds(rounds: Iterable[Round]) -> List[Round]:
    """Completed rounds (gross score above zero). 9-hole rounds are included."""
    return [r for r in rounds if r.is_qualifying()]


def handicap_index_for_rounds(rounds: Iterable[Round]) -> float:
    """Handicap index from each qualifying round's to-par score."""
    return calculate_handicap_index([r.to_par_gross for r in qualifying_rounds(rounds)])


def rounds_needed_for_handicap(qualifying_count: int) -> int:
    return max(0, ROUNDS_NEEDED_FOR_HANDICAP - qualifying_count)


def _numeric_handicap(handicap: Any) -> float:
    # Stored handicaps arrive as numbers, numeric strings or null.
    return coerce_number(handicap, 0.0)


def net_score(gross_score: int, handicap: Any) -> int:
    """Gross score less the handicap, rounded to a whole stroke. Never below zero."""
    return max(0, round_half_up(gross_score - _numeric_handicap(handicap)))


def net_to_par(to_par_gross: int, handicap: Any) -> int:
    """To-par score less the handicap. Plus handicaps push it up."""
    return round_half_up(to_par_gross - _numeric_handicap(handicap))
