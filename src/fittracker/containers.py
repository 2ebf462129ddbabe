"""Dependency container wiring for the application."""

from dataclasses import dataclass

from fittracker.adapters.in_memory_food_catalog import InMemoryFoodCatalogRepository
from fittracker.adapters.in_memory_goals_repository import InMemoryGoalsRepository
from fittracker.adapters.in_memory_meal_log_repository import (
    InMemoryMealLogRepository,
)
from fittracker.config import Settings, default_goals
from fittracker.services.catalog import FoodCatalogService
from fittracker.services.goals import GoalsService, validate_goals
from fittracker.services.meals import MealLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: FoodCatalogService
    goals_service: GoalsService
    meal_log_service: MealLogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_service = FoodCatalogService(
        InMemoryFoodCatalogRepository.with_sample_foods()
    )
    goals_service = GoalsService(
        repository=InMemoryGoalsRepository(),
        defaults=validate_goals(default_goals(resolved_settings)),
    )
    meal_log_service = MealLogService(
        repository=InMemoryMealLogRepository(),
        catalog_service=catalog_service,
        goals_service=goals_service,
        timezone_name=resolved_settings.timezone,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        goals_service=goals_service,
        meal_log_service=meal_log_service,
    )
