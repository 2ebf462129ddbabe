"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fittracker.domain.nutrition import NutritionGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    goal_calories: float = 2200
    goal_protein_g: float = 150
    goal_carbs_g: float = 275
    goal_fat_g: float = 73
    goal_fiber_g: float = 25
    goal_water_ml: float = 2500
    debug: bool = False
    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        env_prefix="FITTRACKER_",
        extra="ignore",
        populate_by_name=True,
    )


def default_goals(settings: Settings) -> NutritionGoals:
    """Build the goal set used until the user stores their own."""
    return NutritionGoals(
        calories=settings.goal_calories,
        protein_g=settings.goal_protein_g,
        carbs_g=settings.goal_carbs_g,
        fat_g=settings.goal_fat_g,
        fiber_g=settings.goal_fiber_g,
        water_ml=settings.goal_water_ml,
    )
