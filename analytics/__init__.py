from .achievements import ACHIEVEMENT_CATALOG, achievement_summary, calculate_achievements
from .best_score import calculate_potential_best_score
from .handicap import calculate_handicap_index, handicap_index_for_rounds
from .hole_outcomes import calculate_hole_outcomes, filter_rounds_by_period
from .milestones import calculate_milestones, get_recent_milestones, milestones_by_type
from .stableford import gross_stableford, net_stableford, round_stableford
from .stats import calculate_course_stats, calculate_stats, score_progression
from .visualizations import (
    plot_course_averages,
    plot_hole_outcomes,
    plot_score_progression,
)

__all__ = [
    "ACHIEVEMENT_CATALOG",
    "achievement_summary",
    "calculate_achievements",
    "calculate_potential_best_score",
    "calculate_handicap_index",
    "handicap_index_for_rounds",
    "calculate_hole_outcomes",
    "filter_rounds_by_period",
    "calculate_milestones",
    "get_recent_milestones",
    "milestones_by_type",
    "calculate_course_stats",
    "calculate_stats",
    "score_progression",
    "gross_stableford",
    "net_stableford",
    "round_stableford",
    "plot_course_averages",
    "plot_hole_outcomes",
    "plot_score_progression",
]
