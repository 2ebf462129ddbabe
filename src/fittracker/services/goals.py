"""Nutrition goals service."""

import math
from dataclasses import asdict, dataclass, replace
from typing import Protocol

from fittracker.domain.nutrition import NutritionGoals


class GoalsRepository(Protocol):
    """Persistence interface for the active goal set."""

    def get_goals(self) -> NutritionGoals | None:
        """Return the stored goals, if any."""

    def set_goals(self, goals: NutritionGoals) -> None:
        """Replace the stored goals."""


@dataclass
class GoalsService:
    """Service for reading and replacing the active nutrition goals."""

    repository: GoalsRepository
    defaults: NutritionGoals

    def get_goals(self) -> NutritionGoals:
        """Return the active goals or the configured defaults."""
        return self.repository.get_goals() or self.defaults

    def update_goals(self, **changes: float | None) -> NutritionGoals:
        """Merge the given targets over the current goals and store them."""
        provided = {
            name: value for name, value in changes.items() if value is not None
        }
        updated = validate_goals(replace(self.get_goals(), **provided))
        self.repository.set_goals(updated)
        return updated


def validate_goals(goals: NutritionGoals) -> NutritionGoals:
    """Raise ValueError when any goal is negative or not finite."""
    for name, value in asdict(goals).items():
        if value is not None and (not math.isfinite(value) or value < 0):
            raise ValueError(f"{name} goal must be a finite, non-negative number")
    return goals
