from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class Stats(BaseModel):
    """Aggregate numbers for a golfer's whole round history."""
    total_rounds: int = 0
    best_gross_score: int = 0
    best_net_score: Optional[int] = None
    best_to_par: int = 0
    best_to_par_net: Optional[int] = None
    average_score: float = 0.0
    handicap_index: float = 0.0
    rounds_needed_for_handicap: int = 0
    best_stableford: Optional[int] = None
    average_stableford: Optional[float] = None


class CourseStats(BaseModel):
    """Best and average scores for the rounds played at one course."""
    course_id: str
    course_name: str
    club_name: str
    city: Optional[str] = None
    state: Optional[str] = None
    rounds_played: int = 0
    best_gross_score: int = 0
    best_net_score: Optional[int] = None
    best_to_par: int = 0
    best_to_par_net: Optional[int] = None
    average_score: float = 0.0


class HoleOutcomeTally(BaseModel):
    """How every recorded hole finished relative to par."""
    eagles: int = 0
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    double_bogeys: int = 0
    others: int = 0
    total_holes: int = 0

    def percentages(self) -> Dict[str, float]:
        """Share of holes per outcome, 0-100. All zero when no holes were counted."""
        buckets = {
            "eagles": self.eagles,
            "birdies": self.birdies,
            "pars": self.pars,
            "bogeys": self.bogeys,
            "double_bogeys": self.double_bogeys,
            "others": self.others,
        }
        if not self.total_holes:
            return {name: 0.0 for name in buckets}
        return {name: count / self.total_holes * 100.0 for name, count in buckets.items()}


class HoleBestScore(BaseModel):
    hole: int
    par: int
    best_score: int
    rounds: int  # rounds with a score recorded for this hole


class PotentialBestScore(BaseModel):
    """Sum of a golfer's best score on every hole of a course."""
    hole_scores: List[HoleBestScore] = Field(default_factory=list)
    total_par: int = 0
    total_best_score: int = 0
    front_nine_par: int = 0
    front_nine_best_score: int = 0
    back_nine_par: int = 0
    back_nine_best_score: int = 0
