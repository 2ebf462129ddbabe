"""Daily and weekly nutrition aggregation over a meal log.

Everything here is a pure function of its arguments: the meal log, the
food catalog and the goals are passed in as snapshots and nothing is
mutated or stored. Entries that reference a food missing from the catalog
contribute nothing to the totals; their food ids are reported on the
summary so callers can surface the gap.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta, tzinfo

from fittracker.domain.meals import MealEntry, MealSlot
from fittracker.domain.nutrition import (
    DailyNutritionSummary,
    FoodItem,
    MacroPercentages,
    NutrientTotals,
    NutritionGoals,
    ProgressRatios,
    WeeklyAverages,
)

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9
WEEK_DAYS = 7


def compute_portion(food: FoodItem, amount_g: float) -> NutrientTotals:
    """Return the nutrients in ``amount_g`` grams of a food."""
    return NutrientTotals(
        calories=food.calories * amount_g / 100,
        protein_g=food.protein_g * amount_g / 100,
        carbs_g=food.carbs_g * amount_g / 100,
        fat_g=food.fat_g * amount_g / 100,
        fiber_g=(food.fiber_g or 0.0) * amount_g / 100,
        sugar_g=(food.sugar_g or 0.0) * amount_g / 100,
        sodium_mg=(food.sodium_mg or 0.0) * amount_g / 100,
    )


def compute_daily_totals(
    entries: Iterable[MealEntry],
    catalog: Mapping[str, FoodItem],
    day: date,
    tz: tzinfo,
) -> DailyNutritionSummary:
    """Sum the nutrients of every entry logged on ``day`` in ``tz``."""
    day_entries = tuple(
        entry for entry in entries if _local_day(entry.logged_at, tz) == day
    )
    total = NutrientTotals()
    missing: list[str] = []
    for entry in day_entries:
        food = catalog.get(entry.food_id)
        if food is None:
            if entry.food_id not in missing:
                missing.append(entry.food_id)
            continue
        total = total + compute_portion(food, entry.amount_g)

    return DailyNutritionSummary(
        day=day,
        calories=total.calories,
        protein_g=total.protein_g,
        carbs_g=total.carbs_g,
        fat_g=total.fat_g,
        fiber_g=total.fiber_g,
        sugar_g=total.sugar_g,
        sodium_mg=total.sodium_mg,
        entries=day_entries,
        missing_food_ids=tuple(missing),
    )


def compute_progress(
    summary: DailyNutritionSummary, goals: NutritionGoals | None
) -> ProgressRatios:
    """Return progress toward each goal, clamped to [0, 1]."""
    if goals is None:
        goals = NutritionGoals()
    return ProgressRatios(
        calories=_ratio(summary.calories, goals.calories),
        protein=_ratio(summary.protein_g, goals.protein_g),
        carbs=_ratio(summary.carbs_g, goals.carbs_g),
        fat=_ratio(summary.fat_g, goals.fat_g),
        fiber=_ratio(summary.fiber_g, goals.fiber_g),
    )


def compute_macro_percentages(summary: DailyNutritionSummary) -> MacroPercentages:
    """Return the share of the day's calories coming from each macro."""
    if not math.isfinite(summary.calories) or summary.calories <= 0:
        return MacroPercentages(protein=0, carbs=0, fat=0)

    protein_calories = summary.protein_g * CALORIES_PER_GRAM_PROTEIN
    carbs_calories = summary.carbs_g * CALORIES_PER_GRAM_CARBS
    fat_calories = summary.fat_g * CALORIES_PER_GRAM_FAT
    return MacroPercentages(
        protein=_percent(protein_calories, summary.calories),
        carbs=_percent(carbs_calories, summary.calories),
        fat=_percent(fat_calories, summary.calories),
    )


def compute_weekly_averages(
    entries: Iterable[MealEntry],
    catalog: Mapping[str, FoodItem],
    reference_day: date,
    tz: tzinfo,
) -> WeeklyAverages:
    """Average the daily totals of the 7 days ending on ``reference_day``.

    Only days with logged calories count toward the average, so three
    logged days out of seven are averaged over three. With no logged days
    the averages are zero.
    """
    snapshot = list(entries)
    start = reference_day - timedelta(days=WEEK_DAYS - 1)
    daily = [
        compute_daily_totals(snapshot, catalog, start + timedelta(days=offset), tz)
        for offset in range(WEEK_DAYS)
    ]

    total = NutrientTotals()
    days_logged = 0
    for summary in daily:
        if summary.calories <= 0:
            continue
        total = total + summary.totals
        days_logged += 1

    divisor = max(days_logged, 1)
    return WeeklyAverages(
        start=start,
        end=reference_day,
        days_logged=days_logged,
        avg_calories=total.calories / divisor,
        avg_protein_g=total.protein_g / divisor,
        avg_carbs_g=total.carbs_g / divisor,
        avg_fat_g=total.fat_g / divisor,
        avg_fiber_g=total.fiber_g / divisor,
        daily=daily,
    )


def entries_for_slot(
    entries: Iterable[MealEntry], day: date, slot: MealSlot, tz: tzinfo
) -> list[MealEntry]:
    """Return the entries logged for one meal slot on ``day``."""
    return [
        entry
        for entry in entries
        if entry.meal_slot == slot and _local_day(entry.logged_at, tz) == day
    ]


def _local_day(logged_at: datetime, tz: tzinfo) -> date:
    # Naive timestamps are already local to the caller.
    if logged_at.tzinfo is None:
        return logged_at.date()
    return logged_at.astimezone(tz).date()


def _ratio(actual: float, goal: float | None) -> float:
    if goal is None or not goal > 0:
        return 0.0
    ratio = actual / goal
    if math.isnan(ratio):
        return 0.0
    return max(0.0, min(ratio, 1.0))


def _percent(part: float, whole: float) -> int:
    share = part / whole * 100
    if math.isnan(share):
        return 0
    return int(max(0.0, min(share, 100.0)))
