import datetime as dt
from enum import Enum
from pydantic import BaseModel
from typing import Optional


class MilestoneType(str, Enum):
    BIRDIE = "birdie"
    EAGLE = "eagle"
    HOLE_IN_ONE = "hole_in_one"
    ROUND = "round"
    COURSE = "course"
    HANDICAP = "handicap"
    SCORE = "score"
    BEST_ROUND = "best_round"
    STABLEFORD = "stableford"


class Milestone(BaseModel):
    """The first time a counting threshold was crossed."""
    id: str
    type: MilestoneType
    title: str
    description: str
    date: Optional[dt.date] = None
    value: float
