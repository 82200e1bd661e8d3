from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional, Sequence

from models.round import Round

from .hole_outcomes import calculate_hole_outcomes
from .stats import calculate_course_stats, score_progression


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def _date_labels(dates: Sequence[Optional[dt.date]]) -> list[str]:
    labels: list[str] = []
    for index, played_on in enumerate(dates, start=1):
        labels.append(played_on.strftime("%Y-%m-%d") if played_on else f"R{index}")
    return labels


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = max(1, count // max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        tick_positions.append(count - 1)
    tick_labels = [labels[i] for i in tick_positions]
    ax.set_xticks(tick_positions)
    ax.set_xticklabels(tick_labels, rotation=45, ha="right")


def plot_score_progression(rounds: Iterable[Round], labels: Optional[Sequence[str]] = None):
    """
    Combined chart, oldest round first:
    - line: gross score per round
    - line: handicap index after each round
    """
    plt = _load_plt()
    rows = score_progression(rounds)
    x_labels = list(labels) if labels is not None else _date_labels([row["date"] for row in rows])
    x = list(range(len(rows)))
    scores = [row["gross_score"] for row in rows]
    handicaps = [row["handicap_index"] for row in rows]

    fig, ax1 = plt.subplots(figsize=(11, 5))
    ax1.plot(x, scores, marker="o", linewidth=1.5, label="Gross Score")
    ax1.set_title("Score Progression")
    ax1.set_xlabel("Round")
    ax1.set_ylabel("Gross Score")
    _apply_sparse_xticks(ax1, x_labels)
    ax1.grid(axis="y", alpha=0.2)

    ax2 = ax1.twinx()
    ax2.plot(x, handicaps, color="black", linestyle="--", linewidth=1.5, label="Handicap Index")
    ax2.set_ylabel("Handicap Index")
    ax2.set_ylim(0, max(10.0, max(handicaps, default=0) + 2))

    lines1, labels1 = ax1.get_legend_handles_labels()
    lines2, labels2 = ax2.get_legend_handles_labels()
    ax1.legend(lines1 + lines2, labels1 + labels2, loc="upper right")

    fig.tight_layout()
    return fig, ax1, ax2


def plot_hole_outcomes(rounds: Iterable[Round]):
    """Bar chart: share of holes by outcome (eagle or better through double bogey and worse)."""
    plt = _load_plt()
    tally = calculate_hole_outcomes(rounds)
    shares = tally.percentages()

    categories = [
        ("eagles", "Eagle+"),
        ("birdies", "Birdie"),
        ("pars", "Par"),
        ("bogeys", "Bogey"),
        ("double_bogeys", "Double"),
        ("others", "Other"),
    ]
    x = list(range(len(categories)))

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.bar(x, [shares[key] for key, _ in categories])
    ax.set_title(f"Hole Outcomes ({tally.total_holes} holes)")
    ax.set_xlabel("Outcome")
    ax.set_ylabel("Percent Of Holes")
    ax.set_xticks(x)
    ax.set_xticklabels([label for _, label in categories])
    ax.set_ylim(0, 100)
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_course_averages(rounds: Iterable[Round], handicap_index: Optional[float] = None):
    """Horizontal bars: average and best gross score per course."""
    plt = _load_plt()
    rows = calculate_course_stats(rounds, handicap_index)
    names = [row.course_name for row in rows]
    y = list(range(len(rows)))

    fig, ax = plt.subplots(figsize=(10, max(3, len(rows) * 0.6)))
    ax.barh(y, [row.average_score for row in rows], alpha=0.6, label="Average")
    ax.scatter([row.best_gross_score for row in rows], y, color="black", zorder=3, label="Best")
    ax.set_yticks(y)
    ax.set_yticklabels(names)
    ax.set_title("Scoring By Course")
    ax.set_xlabel("Gross Score")
    ax.legend(loc="lower right")
    ax.grid(axis="x", alpha=0.2)
    fig.tight_layout()
    return fig, ax
