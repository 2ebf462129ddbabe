"""Shared test fixtures."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from fittracker.adapters.in_memory_food_catalog import InMemoryFoodCatalogRepository
from fittracker.adapters.in_memory_goals_repository import InMemoryGoalsRepository
from fittracker.adapters.in_memory_meal_log_repository import (
    InMemoryMealLogRepository,
)
from fittracker.config import Settings, default_goals
from fittracker.containers import AppContainer
from fittracker.domain.meals import MealEntry, MealSlot
from fittracker.domain.nutrition import FoodItem
from fittracker.services.catalog import FoodCatalogService
from fittracker.services.goals import GoalsService
from fittracker.services.meals import MealLogService

BANANA = FoodItem(
    id="banana",
    name="Banana",
    calories=89,
    protein_g=1.1,
    carbs_g=23,
    fat_g=0.3,
    category="Fruits",
)
OATS = FoodItem(
    id="oats",
    name="Oats",
    calories=389,
    protein_g=16.9,
    carbs_g=66,
    fat_g=6.9,
    fiber_g=10.6,
    category="Carbohydrates",
)


def make_entry(
    food_id: str,
    amount_g: float,
    logged_at: datetime,
    meal_slot: MealSlot = MealSlot.BREAKFAST,
) -> MealEntry:
    return MealEntry(
        id=uuid4(),
        food_id=food_id,
        amount_g=amount_g,
        meal_slot=meal_slot,
        logged_at=logged_at,
    )


def at(year: int, month: int, day: int, hour: int = 12) -> datetime:
    return datetime(year, month, day, hour, tzinfo=UTC)


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone="UTC", environment="test")


@pytest.fixture
def catalog() -> dict[str, FoodItem]:
    return {BANANA.id: BANANA, OATS.id: OATS}


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    catalog_service = FoodCatalogService(
        InMemoryFoodCatalogRepository.with_sample_foods()
    )
    goals_service = GoalsService(
        repository=InMemoryGoalsRepository(),
        defaults=default_goals(settings),
    )
    meal_log_service = MealLogService(
        repository=InMemoryMealLogRepository(),
        catalog_service=catalog_service,
        goals_service=goals_service,
        timezone_name=settings.timezone,
    )
    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        goals_service=goals_service,
        meal_log_service=meal_log_service,
    )
