"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from fittracker.api.app import create_app
from fittracker.containers import AppContainer


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_and_get_food(container: AppContainer) -> None:
    client = _client(container)

    search = client.get("/foods", params={"query": "banana"})
    detail = client.get("/foods/banana")
    missing = client.get("/foods/dragonfruit")

    assert search.status_code == 200
    assert search.json()["foods"][0]["id"] == "banana"
    assert detail.json()["calories"] == 89
    assert missing.status_code == 404


def test_create_food_and_lookup_barcode(container: AppContainer) -> None:
    client = _client(container)

    created = client.post(
        "/foods",
        json={
            "id": "skyr",
            "name": "Skyr",
            "calories": 63,
            "protein_g": 11,
            "carbs_g": 4,
            "fat_g": 0.2,
            "barcode": "5690527610090",
        },
    )
    duplicate = client.post(
        "/foods",
        json={
            "id": "skyr",
            "name": "Skyr",
            "calories": 63,
            "protein_g": 11,
            "carbs_g": 4,
            "fat_g": 0.2,
        },
    )
    by_barcode = client.get("/foods/barcode/5690527610090")

    assert created.status_code == 201
    assert duplicate.status_code == 422
    assert by_barcode.json()["id"] == "skyr"


def test_log_meal_and_read_daily_nutrition(container: AppContainer) -> None:
    client = _client(container)
    client.put("/goals", json={"calories": 356})

    created = client.post(
        "/meals",
        json={
            "food_id": "banana",
            "amount_g": 200,
            "meal_slot": "breakfast",
            "logged_at": "2026-03-10T08:00:00+00:00",
        },
    )
    daily = client.get("/nutrition/daily", params={"day": "2026-03-10"})

    assert created.status_code == 201
    assert created.json()["meal_slot"] == "breakfast"
    data = daily.json()
    assert round(data["summary"]["calories"], 6) == 178
    assert data["summary"]["goals"]["calories"] == 356
    assert data["progress"]["calories"] == 0.5
    assert set(data["macros"]) == {"protein", "carbs", "fat"}


def test_log_meal_rejects_negative_amount(container: AppContainer) -> None:
    response = _client(container).post(
        "/meals",
        json={"food_id": "banana", "amount_g": -10, "meal_slot": "lunch"},
    )

    assert response.status_code == 422


def test_update_and_delete_meal(container: AppContainer) -> None:
    client = _client(container)
    entry_id = client.post(
        "/meals",
        json={
            "food_id": "oats",
            "amount_g": 50,
            "meal_slot": "breakfast",
            "logged_at": "2026-03-10T07:30:00+00:00",
        },
    ).json()["id"]

    updated = client.put(f"/meals/{entry_id}", json={"amount_g": 80})
    listed = client.get(
        "/meals", params={"day": "2026-03-10", "slot": "breakfast"}
    )
    deleted = client.delete(f"/meals/{entry_id}")
    deleted_again = client.delete(f"/meals/{entry_id}")

    assert updated.json()["amount_g"] == 80
    assert [entry["id"] for entry in listed.json()["entries"]] == [entry_id]
    assert deleted.status_code == 204
    assert deleted_again.status_code == 404


def test_update_goals_validation(container: AppContainer) -> None:
    client = _client(container)

    ok = client.put("/goals", json={"protein_g": 120})
    bad = client.put("/goals", json={"protein_g": -1})

    assert ok.json()["protein_g"] == 120
    assert ok.json()["calories"] == 2200
    assert bad.status_code == 422
    assert client.get("/goals").json()["protein_g"] == 120


def test_weekly_nutrition(container: AppContainer) -> None:
    client = _client(container)
    for day in ("2026-03-06", "2026-03-10"):
        client.post(
            "/meals",
            json={
                "food_id": "banana",
                "amount_g": 100,
                "meal_slot": "snack",
                "logged_at": f"{day}T15:00:00+00:00",
            },
        )

    response = client.get("/nutrition/weekly", params={"day": "2026-03-10"})

    data = response.json()
    assert data["days_logged"] == 2
    assert round(data["avg_calories"], 6) == 89
    assert data["start"] == "2026-03-04"
    assert len(data["daily_calories"]) == 7


def test_asgi_module_builds_default_app() -> None:
    from fittracker.api.asgi import app

    assert TestClient(app).get("/foods/oats").json()["name"] == "Oats"


@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
def test_log_meal_rejects_non_finite_amount(
    container: AppContainer, amount: str
) -> None:
    client = _client(container)

    response = client.post(
        "/meals",
        content=(
            '{"food_id": "banana", "meal_slot": "lunch", '
            f'"logged_at": "2026-03-10T12:00:00+00:00", "amount_g": {amount}}}'
        ),
        headers={"Content-Type": "application/json"},
    )
    daily = client.get("/nutrition/daily", params={"day": "2026-03-10"})

    assert response.status_code == 422
    assert daily.status_code == 200
    assert daily.json()["summary"]["entries"] == []


def test_update_goals_rejects_non_finite_value(container: AppContainer) -> None:
    response = _client(container).put(
        "/goals",
        content='{"calories": Infinity}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422


@pytest.mark.parametrize("limit", [0, -1, 101])
def test_search_foods_limit_is_bounded(container: AppContainer, limit: int) -> None:
    response = _client(container).get("/foods", params={"limit": limit})

    assert response.status_code == 422
