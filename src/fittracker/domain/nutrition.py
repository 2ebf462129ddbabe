"""Nutrition domain models."""

from dataclasses import dataclass, field
from datetime import date

from fittracker.domain.meals import MealEntry


@dataclass(frozen=True)
class FoodItem:
    """Reference nutrition facts for a food, per 100 grams."""

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None = None
    sugar_g: float | None = None
    sodium_mg: float | None = None
    category: str = "Other"
    brand: str | None = None
    barcode: str | None = None
    serving_size_g: float | None = 100


@dataclass(frozen=True)
class NutrientTotals:
    """Nutrient amounts for a portion or a set of portions."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    sodium_mg: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sugar_g=self.sugar_g + other.sugar_g,
            sodium_mg=self.sodium_mg + other.sodium_mg,
        )


@dataclass(frozen=True)
class NutritionGoals:
    """Daily nutrition targets; None means no target is set."""

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    water_ml: float | None = None


@dataclass(frozen=True)
class DailyNutritionSummary:
    """Totals for one calendar day, derived from the meal log."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sugar_g: float
    sodium_mg: float
    entries: tuple[MealEntry, ...] = ()
    missing_food_ids: tuple[str, ...] = ()
    goals: NutritionGoals | None = None

    @property
    def totals(self) -> NutrientTotals:
        return NutrientTotals(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            fiber_g=self.fiber_g,
            sugar_g=self.sugar_g,
            sodium_mg=self.sodium_mg,
        )


@dataclass(frozen=True)
class ProgressRatios:
    """Progress toward each goal, clamped to [0, 1]."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories from each macro, truncated to whole percent."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class WeeklyAverages:
    """Mean daily intake over the logged days of a trailing week."""

    start: date
    end: date
    days_logged: int
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float
    avg_fiber_g: float
    daily: list[DailyNutritionSummary] = field(default_factory=list)
