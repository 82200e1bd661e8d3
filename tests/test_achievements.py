from datetime import date

from analytics.achievements import (
    ACHIEVEMENT_CATALOG,
    achievement_summary,
    calculate_achievements,
)
from analytics.milestones import (
    calculate_milestones,
    get_recent_milestones,
    milestone_label,
    milestones_by_type,
    ordinal,
)
from models import CourseRef, MilestoneType, Round


def _round(gross=95, *, day=1, month=1, **kwargs) -> Round:
    return Round(
        date=date(2024, month, day),
        gross_score=gross,
        to_par_gross=gross - 72,
        **kwargs,
    )


def _by_id(achievements):
    return {a.id: a for a in achievements}


def _hole(number, par, strokes):
    return {"hole": number, "par": par, "strokes": strokes}


# ================================================================
# Achievements
# ================================================================

def test_catalog_ids_are_unique():
    ids = [d.id for d in ACHIEVEMENT_CATALOG]
    assert len(ids) == 15
    assert len(set(ids)) == 15


def test_no_rounds_all_locked():
    achievements = calculate_achievements([])

    assert len(achievements) == 15
    assert not any(a.unlocked for a in achievements)
    assert all(a.unlocked_date is None for a in achievements)


def test_single_round_score_thresholds():
    achievements = _by_id(calculate_achievements([_round(95, day=10)]))

    for unlocked_id in ("broke_120", "broke_110", "broke_100"):
        assert achievements[unlocked_id].unlocked
        assert achievements[unlocked_id].unlocked_date == date(2024, 1, 10)
    assert not achievements["broke_90"].unlocked
    assert not achievements["broke_80"].unlocked

    summary = achievement_summary(list(achievements.values()))
    assert (summary.total, summary.unlocked, summary.percentage) == (15, 3, 20)


def test_nine_hole_rounds_do_not_break_thresholds():
    achievements = _by_id(calculate_achievements([_round(45, holes_played=9)]))

    assert not any(achievements[a].unlocked for a in ("broke_120", "broke_100", "broke_80"))


def test_incomplete_round_does_not_break_thresholds():
    achievements = _by_id(calculate_achievements([_round(0)]))

    assert not achievements["broke_120"].unlocked


def test_hole_achievements_use_first_round_chronologically():
    later = _round(day=20, hole_scores=[_hole(1, 4, 3)])
    earlier = _round(day=5, hole_scores=[_hole(1, 4, 3), _hole(2, 4, 4)])
    achievements = _by_id(calculate_achievements([later, earlier]))

    assert achievements["first_birdie"].unlocked_date == date(2024, 1, 5)
    assert achievements["first_par"].unlocked_date == date(2024, 1, 5)
    assert not achievements["first_eagle"].unlocked


def test_eagle_does_not_count_as_birdie_achievement():
    achievements = _by_id(calculate_achievements([_round(hole_scores=[_hole(1, 5, 3)])]))

    assert achievements["first_eagle"].unlocked
    assert not achievements["first_birdie"].unlocked


def test_score_achievement_date_is_first_round_below_threshold():
    rounds = [_round(105, day=1), _round(98, day=2), _round(99, day=3)]
    achievements = _by_id(calculate_achievements(rounds))

    assert achievements["broke_110"].unlocked_date == date(2024, 1, 1)
    assert achievements["broke_100"].unlocked_date == date(2024, 1, 2)


def test_course_and_round_counts():
    rounds = [_round(day=i + 1, course_id=str(i % 3)) for i in range(10)]
    achievements = _by_id(calculate_achievements(rounds))

    assert achievements["courses_3"].unlocked
    assert not achievements["courses_5"].unlocked
    assert achievements["rounds_5"].unlocked
    assert achievements["rounds_10"].unlocked
    assert not achievements["rounds_25"].unlocked
    # count achievements are undated
    assert achievements["rounds_10"].unlocked_date is None
    assert achievements["courses_3"].unlocked_date is None


def test_course_identity_from_embedded_course():
    rounds = [
        _round(day=1, course=CourseRef(id="a", name="A")),
        _round(day=2, course_id="b"),
        _round(day=3, course_id="c"),
        _round(day=4),
    ]
    assert _by_id(calculate_achievements(rounds))["courses_3"].unlocked


def test_achievements_are_idempotent():
    rounds = [_round(88, day=3, hole_scores=[_hole(1, 4, 3)]), _round(79, day=1)]
    assert calculate_achievements(rounds) == calculate_achievements(rounds)


def test_summary_of_empty_list():
    summary = achievement_summary([])
    assert (summary.total, summary.unlocked, summary.percentage) == (0, 0, 0)


# ================================================================
# Milestones
# ================================================================

def test_no_rounds_no_milestones():
    assert calculate_milestones([]) == []
    assert get_recent_milestones([]) == []


def test_single_round_milestones():
    milestones = calculate_milestones([_round(75, day=12, course_id="c1")])
    ids = {m.id for m in milestones}

    assert ids == {
        "round-1",
        "course-1",
        "score-120",
        "score-110",
        "score-100",
        "score-90",
        "score-80",
    }
    assert all(m.date == date(2024, 1, 12) for m in milestones)
    assert next(m for m in milestones if m.id == "score-80").value == 75


def test_milestones_are_most_recent_first():
    rounds = [_round(gross, day=day) for day, gross in [(3, 110), (1, 118), (9, 99), (5, 104)]]
    milestones = calculate_milestones(rounds)
    dates = [m.date for m in milestones]

    assert dates == sorted(dates, reverse=True)


def test_birdie_milestones_count_eagles():
    holes = [_hole(1, 5, 3)] + [_hole(i, 4, 3) for i in range(2, 6)]
    milestones = milestones_by_type([_round(hole_scores=holes)])

    # one eagle and four birdies reach the 5 birdie mark
    assert sorted(m.value for m in milestones[MilestoneType.BIRDIE]) == [1, 5]
    assert [m.value for m in milestones[MilestoneType.EAGLE]] == [1]


def test_round_milestone_counts():
    rounds = [_round(day=i + 1) for i in range(10)]
    round_milestones = milestones_by_type(rounds)[MilestoneType.ROUND]

    assert sorted(m.value for m in round_milestones) == [1, 5, 10]
    tenth = next(m for m in round_milestones if m.value == 10)
    assert tenth.date == date(2024, 1, 10)
    assert tenth.title == "10th Round"


def test_score_milestones_only_first_time():
    rounds = [_round(95, day=1), _round(92, day=2), _round(85, day=3)]
    scores = milestones_by_type(rounds)[MilestoneType.SCORE]

    assert sorted(m.id for m in scores) == ["score-100", "score-110", "score-120", "score-90"]
    assert next(m for m in scores if m.id == "score-100").date == date(2024, 1, 1)
    assert next(m for m in scores if m.id == "score-90").date == date(2024, 1, 3)


def test_best_round_milestones():
    rounds = [_round(100, day=1), _round(96, day=2), _round(98, day=3), _round(91, day=4)]
    best = milestones_by_type(rounds)[MilestoneType.BEST_ROUND]

    assert sorted(m.value for m in best) == [91, 96]


def test_handicap_milestones():
    rounds = [
        _round(day=1, handicap_at_posting=20.4),
        _round(day=2, handicap_at_posting=19.1),
        _round(day=3, handicap_at_posting=19.5),
        _round(day=4),
        _round(day=5, handicap_at_posting=18.0),
    ]
    handicaps = milestones_by_type(rounds)[MilestoneType.HANDICAP]

    assert [m.title for m in handicaps] == ["Handicap Improved", "Handicap Improved", "First Handicap"]
    assert [m.value for m in handicaps] == [18.0, 19.1, 20.4]


def test_recent_milestones_limit():
    rounds = [_round(80 + i, day=i + 1, course_id=str(i)) for i in range(6)]

    assert len(get_recent_milestones(rounds)) == 3
    assert len(get_recent_milestones(rounds, limit=1)) == 1
    assert get_recent_milestones(rounds) == calculate_milestones(rounds)[:3]


def test_milestones_by_type_has_every_type():
    grouped = milestones_by_type([])
    assert set(grouped) == set(MilestoneType)
    assert all(items == [] for items in grouped.values())


def test_ordinal_and_labels():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 101, 112)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "101st", "112th"
    ]
    assert milestone_label(MilestoneType.BIRDIE) == "Birdies"
    assert milestone_label(MilestoneType.BEST_ROUND) == "Personal Bests"


def test_hole_in_one_milestones():
    rounds = [
        _round(day=1, hole_scores=[_hole(1, 3, 1)]),
        _round(day=9, hole_scores=[_hole(7, 3, 1), _hole(8, 5, 3)]),
    ]
    grouped = milestones_by_type(rounds)

    aces = sorted(grouped[MilestoneType.HOLE_IN_ONE], key=lambda m: m.value)
    assert [m.title for m in aces] == ["First Hole-in-One!", "Hole-in-One #2"]
    assert [m.date for m in aces] == [date(2024, 1, 1), date(2024, 1, 9)]
    # aces are not eagles, so only the par-5 eagle counts
    assert [(m.value, m.date) for m in grouped[MilestoneType.EAGLE]] == [(1, date(2024, 1, 9))]


def test_stableford_milestones():
    rounds = [
        _round(day=1, stableford_gross=22),
        _round(day=2, stableford_gross=31),
        _round(day=3, stableford_gross=27),
        _round(day=4, stableford_gross=0),
    ]
    stableford = milestones_by_type(rounds)[MilestoneType.STABLEFORD]
    by_id = {m.id: m for m in stableford}

    assert set(by_id) == {"stableford-20", "stableford-25", "stableford-30"}
    assert by_id["stableford-20"].date == date(2024, 1, 1)
    assert by_id["stableford-30"].value == 31
    assert by_id["stableford-25"].title == "25 Stableford Points"


def test_stableford_milestones_from_hole_points():
    holes = [_hole(i, 4, 3) for i in range(1, 8)]   # seven birdies, 21 points
    stableford = milestones_by_type([_round(hole_scores=holes)])[MilestoneType.STABLEFORD]

    assert [m.id for m in stableford] == ["stableford-20"]


def test_unreadable_handicap_snapshot_is_not_a_milestone():
    rounds = [_round(day=1, handicap_at_posting="n/a"), _round(day=2, handicap_at_posting=15.2)]
    handicaps = milestones_by_type(rounds)[MilestoneType.HANDICAP]

    assert [(m.title, m.value) for m in handicaps] == [("First Handicap", 15.2)]


def test_new_milestone_labels():
    assert milestone_label(MilestoneType.HOLE_IN_ONE) == "Hole-in-Ones"
    assert milestone_label(MilestoneType.STABLEFORD) == "Stableford"
