import pytest
from datetime import date
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

from fastapi.testclient import TestClient

from api.dependencies import get_app_settings, get_db
from api.main import create_app
from api.routers.stats import build_dashboard
from config import Settings
from database.exceptions import QueryError
from models import CourseRef, Round, Subscription

SETTINGS = Settings(database_url=None, free_round_limit=4)


def _rounds():
    links = CourseRef(id=1, name="Pebble Club - Links Course")
    rounds = [
        Round(
            id=str(i),
            date=date(2024, 1, i + 1),
            gross_score=72 + to_par,
            to_par_gross=to_par,
            course=links if i % 2 else None,
            course_id="1" if i % 2 else "2",
        )
        for i, to_par in enumerate([10, 8, 12, 9, 11])
    ]
    rounds[0] = rounds[0].model_copy(
        update={"hole_scores": Round(hole_scores=[{"hole": 1, "par": 4, "strokes": 3}]).hole_scores}
    )
    return rounds


@pytest.fixture
def fake_db():
    return SimpleNamespace(
        rounds=SimpleNamespace(
            get_rounds_for_user=AsyncMock(return_value=_rounds()),
            count_rounds_for_user=AsyncMock(return_value=5),
        ),
        subscriptions=SimpleNamespace(get_subscription=AsyncMock(return_value=None)),
    )


@pytest.fixture
def client(fake_db):
    # No context manager: the lifespan (and its real pool) never starts.
    app = create_app(SETTINGS)
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_app_settings] = lambda: SETTINGS
    return TestClient(app)


# ================================================================
# Dashboard payload
# ================================================================

def test_build_dashboard():
    dashboard = build_dashboard(_rounds())

    assert dashboard.stats.handicap_index == 8.6
    assert dashboard.stats.total_rounds == 5
    assert dashboard.hole_outcomes.birdies == 1
    assert len(dashboard.recent_milestones) == 3
    assert dashboard.achievements.total == 15


def test_build_dashboard_rejects_unknown_period():
    with pytest.raises(ValueError):
        build_dashboard([], "decade")


# ================================================================
# Endpoints
# ================================================================

def test_calculate_endpoint(client):
    payload = {
        "rounds": [
            {"id": 1, "date": "2024-03-01", "gross_score": 95, "to_par_gross": 23,
             "hole_scores": '[{"hole": 1, "par": 4, "strokes": 4}]'},
            {"id": 2, "date": "2024-03-08", "gross_score": "101", "to_par_gross": 29,
             "handicap_at_posting": "bad"},
        ]
    }
    response = client.post("/api/stats/calculate", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["stats"]["best_gross_score"] == 95
    assert body["stats"]["rounds_needed_for_handicap"] == 3
    assert body["hole_outcomes"]["pars"] == 1
    assert body["achievements"]["unlocked"] == 4   # broke 120/110/100 + first par


def test_calculate_endpoint_empty(client):
    response = client.post("/api/stats/calculate", json={"rounds": []})

    assert response.status_code == 200
    body = response.json()
    assert body["stats"]["total_rounds"] == 0
    assert body["stats"]["best_net_score"] is None
    assert body["recent_milestones"] == []


def test_dashboard_endpoint(client, fake_db):
    user_id = uuid4()
    response = client.get(f"/api/stats/dashboard/{user_id}")

    assert response.status_code == 200
    assert response.json()["stats"]["handicap_index"] == 8.6
    fake_db.rounds.get_rounds_for_user.assert_awaited_once_with(user_id)


def test_dashboard_rejects_bad_period(client):
    response = client.get(f"/api/stats/dashboard/{uuid4()}", params={"period": "week"})
    assert response.status_code == 422


def test_dashboard_rejects_bad_user_id(client):
    assert client.get("/api/stats/dashboard/not-a-uuid").status_code == 422


def test_database_errors_map_to_503(client, fake_db):
    fake_db.rounds.get_rounds_for_user.side_effect = QueryError("boom")

    response = client.get(f"/api/stats/dashboard/{uuid4()}")

    assert response.status_code == 503
    assert response.json() == {"detail": "Round store unavailable"}


def test_course_stats_endpoint(client):
    response = client.get(f"/api/stats/courses/{uuid4()}")

    assert response.status_code == 200
    body = response.json()
    assert body["handicap_index"] == 8.6
    by_id = {c["course_id"]: c for c in body["courses"]}
    assert by_id["1"]["club_name"] == "Pebble Club"
    assert by_id["1"]["rounds_played"] == 2
    assert by_id["2"]["rounds_played"] == 3


def test_course_detail_endpoint(client):
    response = client.get(f"/api/stats/courses/{uuid4()}/2")

    assert response.status_code == 200
    body = response.json()
    assert body["course"]["course_id"] == "2"
    assert body["potential_best"]["total_best_score"] == 3

    assert client.get(f"/api/stats/courses/{uuid4()}/999").status_code == 404


def test_achievements_endpoint(client):
    response = client.get(f"/api/stats/achievements/{uuid4()}")

    assert response.status_code == 200
    body = response.json()
    assert len(body["achievements"]) == 15
    unlocked = {a["id"] for a in body["achievements"] if a["unlocked"]}
    assert {"first_birdie", "rounds_5", "broke_90"} <= unlocked
    assert body["summary"]["unlocked"] == len(unlocked)


def test_milestones_endpoint(client):
    all_items = client.get(f"/api/stats/milestones/{uuid4()}").json()
    limited = client.get(f"/api/stats/milestones/{uuid4()}", params={"limit": 2}).json()

    assert len(limited) == 2
    assert limited == all_items[:2]


def test_access_endpoint_free_tier(client, fake_db):
    fake_db.rounds.count_rounds_for_user.return_value = 3

    body = client.get(f"/api/users/{uuid4()}/access").json()

    assert body == {"can_add": True, "has_subscription": False, "round_count": 3, "remaining_rounds": 1}


def test_access_endpoint_subscribed(client, fake_db):
    fake_db.subscriptions.get_subscription.return_value = Subscription(status="active")
    fake_db.rounds.count_rounds_for_user.return_value = 30

    body = client.get(f"/api/users/{uuid4()}/access").json()

    assert body["can_add"] is True
    assert body["remaining_rounds"] is None
