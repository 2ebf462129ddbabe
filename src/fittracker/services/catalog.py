"""Food catalog lookups."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from fittracker.domain.nutrition import FoodItem

_NUTRIENT_FIELDS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sugar_g",
    "sodium_mg",
)


class FoodCatalogRepository(Protocol):
    """Read access to the food catalog plus custom food inserts."""

    def get_food(self, food_id: str) -> FoodItem | None:
        """Return a food by id, if present."""

    def list_foods(self) -> list[FoodItem]:
        """Return every food in catalog order."""

    def add_food(self, food: FoodItem) -> None:
        """Store a new food."""


@dataclass
class FoodCatalogService:
    """Application service for searching and extending the food catalog."""

    repository: FoodCatalogRepository

    def find_food(self, food_id: str) -> FoodItem | None:
        """Return a food by id."""
        return self.repository.get_food(food_id)

    def find_by_barcode(self, barcode: str) -> FoodItem | None:
        """Return the first food with the given barcode."""
        for food in self.repository.list_foods():
            if food.barcode == barcode:
                return food
        return None

    def search(self, query: str | None, limit: int = 10) -> list[FoodItem]:
        """Search by name, category or brand; empty query lists the catalog."""
        if limit < 1:
            return []
        foods = self.repository.list_foods()
        if not query:
            return foods[:limit]
        needle = query.lower()
        matches = [
            food
            for food in foods
            if needle in food.name.lower()
            or needle in food.category.lower()
            or (food.brand is not None and needle in food.brand.lower())
        ]
        return matches[:limit]

    def foods_by_category(self, category: str) -> list[FoodItem]:
        """Return foods in a category, ignoring case."""
        wanted = category.lower()
        return [
            food
            for food in self.repository.list_foods()
            if food.category.lower() == wanted
        ]

    def add_custom_food(self, food: FoodItem) -> FoodItem:
        """Add a user-defined food after validating its values."""
        for name in _NUTRIENT_FIELDS:
            value = getattr(food, name)
            if value is not None and (not math.isfinite(value) or value < 0):
                raise ValueError(f"{name} must be a finite, non-negative number")
        if self.repository.get_food(food.id) is not None:
            raise ValueError(f"Food {food.id!r} already exists")
        self.repository.add_food(food)
        return food

    def as_lookup(self) -> Mapping[str, FoodItem]:
        """Return a snapshot of the catalog keyed by food id."""
        return {food.id: food for food in self.repository.list_foods()}

