"""Nutrition API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from fittracker.api.models import (  # noqa: TC001
    FoodCreate,
    GoalsUpdate,
    MealEntryCreate,
    MealEntryUpdate,
)
from fittracker.domain.meals import MealSlot  # noqa: TC001
from fittracker.domain.nutrition import FoodItem
from fittracker.services import aggregator

if TYPE_CHECKING:
    from fittracker.containers import AppContainer

router = APIRouter()

_UNPROCESSABLE = 422


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _resolve_day(container: AppContainer, day: date | None) -> date:
    if day is not None:
        return day
    return datetime.now(tz=container.meal_log_service.tz).date()


@router.get("/foods", tags=["foods"])
async def search_foods(
    request: Request,
    query: str | None = None,
    limit: int = Query(default=10, ge=1, le=100),
) -> dict[str, object]:
    """Search the food catalog."""
    foods = _container(request).catalog_service.search(query, limit)
    return {"foods": [asdict(food) for food in foods]}


@router.get("/foods/barcode/{barcode}", tags=["foods"])
async def food_by_barcode(barcode: str, request: Request) -> dict[str, object]:
    """Return the food with a barcode."""
    food = _container(request).catalog_service.find_by_barcode(barcode)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(food)


@router.get("/foods/{food_id}", tags=["foods"])
async def get_food(food_id: str, request: Request) -> dict[str, object]:
    """Return a catalog food by id."""
    food = _container(request).catalog_service.find_food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(food)


@router.post("/foods", status_code=status.HTTP_201_CREATED, tags=["foods"])
async def create_food(payload: FoodCreate, request: Request) -> dict[str, object]:
    """Add a custom food to the catalog."""
    try:
        food = _container(request).catalog_service.add_custom_food(
            FoodItem(**payload.model_dump())
        )
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    return asdict(food)


@router.get("/meals", tags=["meals"])
async def list_meals(
    request: Request, day: date | None = None, slot: MealSlot | None = None
) -> dict[str, object]:
    """List the meal entries for a day, optionally for one slot."""
    container = _container(request)
    resolved_day = _resolve_day(container, day)
    service = container.meal_log_service
    if slot is None:
        entries = service.entries_for_day(resolved_day)
    else:
        entries = service.entries_for_slot(resolved_day, slot)
    return {"day": resolved_day, "entries": [asdict(entry) for entry in entries]}


@router.post("/meals", status_code=status.HTTP_201_CREATED, tags=["meals"])
async def create_meal_entry(
    payload: MealEntryCreate, request: Request
) -> dict[str, object]:
    """Log a meal entry."""
    try:
        entry = _container(request).meal_log_service.add_entry(
            food_id=payload.food_id,
            amount_g=payload.amount_g,
            meal_slot=payload.meal_slot,
            logged_at=payload.logged_at,
            notes=payload.notes,
        )
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    return asdict(entry)


@router.put("/meals/{entry_id}", tags=["meals"])
async def update_meal_entry(
    entry_id: UUID, payload: MealEntryUpdate, request: Request
) -> dict[str, object]:
    """Replace the amount or notes of a meal entry."""
    try:
        entry = _container(request).meal_log_service.update_entry(
            entry_id, amount_g=payload.amount_g, notes=payload.notes
        )
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(entry)


@router.delete(
    "/meals/{entry_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["meals"]
)
async def delete_meal_entry(entry_id: UUID, request: Request) -> None:
    """Delete a meal entry."""
    if not _container(request).meal_log_service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/goals", tags=["goals"])
async def get_goals(request: Request) -> dict[str, object]:
    """Return the active nutrition goals."""
    return asdict(_container(request).goals_service.get_goals())


@router.put("/goals", tags=["goals"])
async def update_goals(payload: GoalsUpdate, request: Request) -> dict[str, object]:
    """Update some or all nutrition goals."""
    try:
        goals = _container(request).goals_service.update_goals(**payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    return asdict(goals)


@router.get("/nutrition/daily", tags=["nutrition"])
async def daily_nutrition(
    request: Request, day: date | None = None
) -> dict[str, object]:
    """Return a day's totals, goal progress and macro split."""
    container = _container(request)
    summary = container.meal_log_service.daily_summary(_resolve_day(container, day))
    return {
        "summary": asdict(summary),
        "progress": asdict(aggregator.compute_progress(summary, summary.goals)),
        "macros": asdict(aggregator.compute_macro_percentages(summary)),
    }


@router.get("/nutrition/weekly", tags=["nutrition"])
async def weekly_nutrition(
    request: Request, day: date | None = None
) -> dict[str, object]:
    """Return averages over the trailing week ending on ``day``."""
    container = _container(request)
    averages = container.meal_log_service.weekly_averages(
        _resolve_day(container, day)
    )
    result = asdict(averages)
    result.pop("daily")
    result["daily_calories"] = {
        summary.day.isoformat(): summary.calories for summary in averages.daily
    }
    return result
