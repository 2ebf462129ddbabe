"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class MealSlot(str, Enum):
    """Meal a logged food belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        if self is MealSlot.SNACK:
            return "Snacks"
        return self.value.capitalize()


@dataclass(frozen=True)
class MealEntry:
    """A single logged consumption of a catalog food."""

    id: UUID
    food_id: str
    amount_g: float
    meal_slot: MealSlot
    logged_at: datetime
    notes: str | None = None
