"""In-memory goals store."""

from dataclasses import dataclass

from fittracker.domain.nutrition import NutritionGoals
from fittracker.services.goals import GoalsRepository


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """Keeps the single active goal set in memory."""

    goals: NutritionGoals | None = None

    def get_goals(self) -> NutritionGoals | None:
        return self.goals

    def set_goals(self, goals: NutritionGoals) -> None:
        self.goals = goals
