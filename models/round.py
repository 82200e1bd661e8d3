import datetime as dt
from pydantic import Field, field_validator
from typing import Any, Iterable, List, Optional

from .base import BaseGolfModel, coerce_number
from .course import CourseRef
from .hole_score import HoleScore, HoleScoreSet, parse_hole_scores

FULL_ROUND_HOLES = 18


class Round(BaseGolfModel):
    """A completed round of golf as fetched from the round store."""
    id: Optional[str] = None
    date: Optional[dt.date] = None
    tee_name: Optional[str] = None
    gross_score: int = 0
    to_par_gross: int = 0
    net_score: Optional[int] = None
    to_par_net: Optional[int] = None
    handicap_at_posting: Optional[float] = None  # handicap index in effect when posted
    holes_played: int = Field(FULL_ROUND_HOLES, ge=1, le=18)
    stableford_gross: Optional[int] = None
    stableford_net: Optional[int] = None
    hole_scores: HoleScoreSet = Field(default_factory=HoleScoreSet)
    course_id: Optional[str] = None
    course: Optional[CourseRef] = None

    @field_validator('id', 'course_id', mode='before')
    @classmethod
    def stringify_ids(cls, v):
        if v is None or v == "":
            return None
        return str(v)

    @field_validator('date', mode='before')
    @classmethod
    def truncate_to_date(cls, v):
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return v[:10]
        return v

    @field_validator('gross_score', 'to_par_gross', mode='before')
    @classmethod
    def coerce_score(cls, v):
        return int(coerce_number(v))

    @field_validator('net_score', 'to_par_net', mode='before')
    @classmethod
    def coerce_optional_score(cls, v):
        if v is None:
            return None
        return int(coerce_number(v))

    @field_validator('stableford_gross', 'stableford_net', mode='before')
    @classmethod
    def coerce_points(cls, v):
        number = coerce_number(v, None)
        if number is None:
            return None
        return int(number)

    @field_validator('handicap_at_posting', mode='before')
    @classmethod
    def coerce_handicap(cls, v):
        # An unreadable snapshot is no snapshot; the live index applies instead.
        number = coerce_number(v, None)
        if number is None:
            return None
        return float(number)

    @field_validator('holes_played', mode='before')
    @classmethod
    def default_holes_played(cls, v):
        if v is None:
            return FULL_ROUND_HOLES
        return int(coerce_number(v, FULL_ROUND_HOLES))

    @field_validator('hole_scores', mode='before')
    @classmethod
    def normalize_hole_scores(cls, v):
        return parse_hole_scores(v)

    @property
    def course_key(self) -> Optional[str]:
        """Identifier used to group rounds by course."""
        if self.course_id:
            return self.course_id
        if self.course and self.course.id:
            return self.course.id
        return None

    @property
    def holes(self) -> List[HoleScore]:
        """Usable hole-by-hole scores (empty when none were recorded)."""
        return self.hole_scores.holes

    def is_qualifying(self) -> bool:
        """A completed round that can count toward the handicap index."""
        return self.gross_score > 0

    def is_full_round(self) -> bool:
        return self.holes_played == FULL_ROUND_HOLES

    def handicap_used(self, live_handicap: float) -> float:
        """Handicap for this round's net figures: the posting snapshot wins over the live index."""
        if self.handicap_at_posting is not None:
            return self.handicap_at_posting
        return live_handicap


def _date_sort_key(round_obj: Round) -> Any:
    return round_obj.date or dt.date.min


def sorted_by_date(rounds: Iterable[Round]) -> List[Round]:
    """Rounds oldest first. Stable, so rounds on the same day keep input order."""
    return sorted(rounds, key=_date_sort_key)
