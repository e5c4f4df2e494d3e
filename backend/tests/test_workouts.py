"""Tests for workouts API: log, list by date, detail, recent, ownership."""

from datetime import date, datetime

import pytest
from httpx import AsyncClient

from lifting_diary.models import Workout


def _body(exercises: dict[str, int], title: str = "Push Day", workout_date: str = "2026-02-25") -> dict:
    return {
        "title": title,
        "workout_date": workout_date,
        "exercises": [
            {
                "exercise_id": exercises["Barbell Bench Press"],
                "sets": [
                    {"reps": 8, "weight": "135", "weight_unit": "lbs"},
                    {"reps": 6, "weight": "185", "weight_unit": "lbs"},
                ],
            },
            {
                "exercise_id": exercises["Cable Fly"],
                "sets": [{"reps": 12, "weight": None, "weight_unit": "lbs"}],
            },
        ],
    }


async def _log(client: AsyncClient, headers: dict, body: dict) -> int:
    resp = await client.post("/api/v1/workouts", json=body, headers=headers)
    assert resp.status_code == 303
    return int(resp.headers["x-workout-id"])


@pytest.mark.asyncio
async def test_create_workout_redirects_to_dashboard(client: AsyncClient, auth_headers: dict, exercises):
    resp = await client.post("/api/v1/workouts", json=_body(exercises), headers=auth_headers)
    assert resp.status_code == 303
    assert resp.headers["location"].endswith("/api/v1/dashboard?date=2026-02-25")
    assert int(resp.headers["x-workout-id"]) > 0


@pytest.mark.asyncio
async def test_get_workout_detail(client: AsyncClient, auth_headers: dict, exercises):
    wid = await _log(client, auth_headers, _body(exercises))
    resp = await client.get(f"/api/v1/workouts/{wid}", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == wid
    assert data["title"] == "Push Day"
    assert data["workout_date"].startswith("2026-02-25")
    assert data["started_at"] is not None
    assert data["completed_at"] == data["started_at"]
    assert [e["order"] for e in data["exercises"]] == [1, 2]
    assert [e["exercise_name"] for e in data["exercises"]] == ["Barbell Bench Press", "Cable Fly"]
    bench_sets = data["exercises"][0]["sets"]
    assert [s["set_number"] for s in bench_sets] == [1, 2]
    assert [float(s["weight"]) for s in bench_sets] == [135.0, 185.0]
    assert data["exercises"][1]["sets"][0]["weight"] is None


@pytest.mark.asyncio
async def test_get_workout_of_other_user_is_not_found(
    client: AsyncClient, auth_headers: dict, other_auth_headers: dict, exercises
):
    wid = await _log(client, auth_headers, _body(exercises))
    resp = await client.get(f"/api/v1/workouts/{wid}", headers=other_auth_headers)
    assert resp.status_code == 404
    missing = await client.get(f"/api/v1/workouts/{wid + 100}", headers=other_auth_headers)
    assert missing.status_code == 404
    assert resp.json() == missing.json()
    oversized = await client.get("/api/v1/workouts/100000000000000000000", headers=auth_headers)
    assert oversized.status_code == 404
    assert oversized.json() == missing.json()


@pytest.mark.asyncio
async def test_list_workouts_by_date(client: AsyncClient, session, user_id, auth_headers: dict, other_auth_headers: dict):
    day = datetime(2026, 2, 25)
    rows = [
        Workout(user_id=user_id, workout_date=day, title="Evening", started_at=datetime(2026, 2, 25, 18, 0)),
        Workout(user_id=user_id, workout_date=day, title="Morning", started_at=datetime(2026, 2, 25, 7, 0)),
        Workout(
            user_id=user_id, workout_date=datetime(2026, 2, 26), title="Tomorrow", started_at=datetime(2026, 2, 26, 7, 0)
        ),
    ]
    session.add_all(rows)
    await session.commit()
    second, first = rows[0].id, rows[1].id

    resp = await client.get("/api/v1/workouts?date=2026-02-25", headers=auth_headers)
    assert resp.status_code == 200
    assert [w["id"] for w in resp.json()] == [second, first]
    assert "exercises" not in resp.json()[0]

    resp = await client.get("/api/v1/workouts?date=2026-02-25", headers=other_auth_headers)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_list_workouts_defaults_to_today(client: AsyncClient, auth_headers: dict, exercises):
    wid = await _log(client, auth_headers, _body(exercises, workout_date=date.today().isoformat()))
    resp = await client.get("/api/v1/workouts", headers=auth_headers)
    assert resp.status_code == 200
    assert [w["id"] for w in resp.json()] == [wid]


@pytest.mark.asyncio
async def test_recent_workouts(client: AsyncClient, auth_headers: dict, exercises):
    ids = []
    for day in ("2026-02-20", "2026-02-22", "2026-02-21"):
        ids.append(await _log(client, auth_headers, _body(exercises, workout_date=day)))
    resp = await client.get("/api/v1/workouts/recent", headers=auth_headers)
    assert resp.status_code == 200
    assert [w["id"] for w in resp.json()] == [ids[1], ids[2], ids[0]]


@pytest.mark.asyncio
async def test_create_workout_blank_title_rejected(client: AsyncClient, auth_headers: dict, exercises):
    resp = await client.post("/api/v1/workouts", json=_body(exercises, title="   "), headers=auth_headers)
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Workout title is required."
    listed = await client.get("/api/v1/workouts?date=2026-02-25", headers=auth_headers)
    assert listed.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "mutate",
    [
        lambda b: b.update(exercises=[]),
        lambda b: b["exercises"][0].update(sets=[]),
        lambda b: b["exercises"][0]["sets"][0].update(reps=0),
        lambda b: b["exercises"][0]["sets"][0].update(reps=10**20),
        lambda b: b["exercises"][0]["sets"][0].update(reps=2**31),
        lambda b: b["exercises"][0].update(exercise_id=10**20),
        lambda b: b["exercises"][0]["sets"][0].update(weight_unit="stone"),
        lambda b: b["exercises"][0]["sets"][0].update(weight="heavy"),
        lambda b: b.update(workout_date="25/02/2026"),
    ],
)
async def test_create_workout_invalid_body(client: AsyncClient, auth_headers: dict, exercises, mutate):
    body = _body(exercises)
    mutate(body)
    resp = await client.post("/api/v1/workouts", json=body, headers=auth_headers)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_create_workout_with_other_users_exercise(client: AsyncClient, auth_headers: dict, exercises):
    body = _body(exercises)
    body["exercises"][0]["exercise_id"] = exercises["Landmine Press"]
    resp = await client.post("/api/v1/workouts", json=body, headers=auth_headers)
    assert resp.status_code == 422
    assert "Unknown exercise" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_workouts_unauthorized(client: AsyncClient, exercises):
    resp = await client.post("/api/v1/workouts", json=_body(exercises))
    assert resp.status_code == 401
    resp = await client.get("/api/v1/workouts/recent")
    assert resp.status_code == 401
    resp = await client.get("/api/v1/workouts/1")
    assert resp.status_code == 401
