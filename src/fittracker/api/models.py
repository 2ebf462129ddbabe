"""Pydantic request models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from fittracker.domain.meals import MealSlot


class FoodCreate(BaseModel):
    """Custom food payload, nutrients per 100 grams."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    calories: float = Field(ge=0, allow_inf_nan=False)
    protein_g: float = Field(ge=0, allow_inf_nan=False)
    carbs_g: float = Field(ge=0, allow_inf_nan=False)
    fat_g: float = Field(ge=0, allow_inf_nan=False)
    fiber_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sugar_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sodium_mg: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: str = "Other"
    brand: str | None = None
    barcode: str | None = None
    serving_size_g: float | None = Field(default=100, gt=0, allow_inf_nan=False)


class MealEntryCreate(BaseModel):
    """New meal entry payload."""

    food_id: str = Field(min_length=1)
    amount_g: float = Field(ge=0, allow_inf_nan=False)
    meal_slot: MealSlot
    logged_at: datetime | None = None
    notes: str | None = Field(default=None, max_length=2000)


class MealEntryUpdate(BaseModel):
    """Replacement values for an existing meal entry."""

    amount_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    notes: str | None = Field(default=None, max_length=2000)


class GoalsUpdate(BaseModel):
    """Goal values to change; omitted fields keep their current value."""

    calories: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    protein_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    carbs_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    fat_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    fiber_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    water_ml: float | None = Field(default=None, ge=0, allow_inf_nan=False)
