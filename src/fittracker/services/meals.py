"""Meal logging service."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from fittracker.domain.meals import MealEntry, MealSlot
from fittracker.domain.nutrition import (
    DailyNutritionSummary,
    MacroPercentages,
    ProgressRatios,
    WeeklyAverages,
)
from fittracker.services import aggregator
from fittracker.services.catalog import FoodCatalogService
from fittracker.services.goals import GoalsService

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal entries."""

    def add_entry(self, entry: MealEntry) -> None:
        """Store a new entry."""

    def replace_entry(self, entry: MealEntry) -> None:
        """Replace the stored entry with the same id."""

    def get_entry(self, entry_id: UUID) -> MealEntry | None:
        """Return an entry by id."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry, returning False when it did not exist."""

    def list_entries(self, start: datetime, end: datetime) -> list[MealEntry]:
        """Return entries logged in ``[start, end)``."""


@dataclass
class MealLogService:
    """Service that records meal entries and summarizes them per day."""

    repository: MealLogRepository
    catalog_service: FoodCatalogService
    goals_service: GoalsService
    timezone_name: str = "UTC"
    debug: bool = False

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def add_entry(  # noqa: PLR0913
        self,
        food_id: str,
        amount_g: float,
        meal_slot: MealSlot,
        logged_at: datetime | None = None,
        notes: str | None = None,
    ) -> MealEntry:
        """Validate and record a new meal entry."""
        _validate_amount(amount_g)
        if logged_at is None:
            logged_at = datetime.now(tz=UTC)
        elif logged_at.tzinfo is None:
            logged_at = logged_at.replace(tzinfo=self.tz)
        entry = MealEntry(
            id=uuid4(),
            food_id=food_id,
            amount_g=amount_g,
            meal_slot=MealSlot(meal_slot),
            logged_at=logged_at,
            notes=notes,
        )
        self.repository.add_entry(entry)
        if self.debug:
            _logger.info(
                "Meal entry added: id=%s food_id=%s amount_g=%s",
                entry.id,
                food_id,
                amount_g,
            )
        return entry

    def update_entry(
        self,
        entry_id: UUID,
        amount_g: float | None = None,
        notes: str | None = None,
    ) -> MealEntry | None:
        """Replace an entry with an updated copy."""
        current = self.repository.get_entry(entry_id)
        if current is None:
            return None
        if amount_g is not None:
            _validate_amount(amount_g)
        updated = replace(
            current,
            amount_g=current.amount_g if amount_g is None else amount_g,
            notes=current.notes if notes is None else notes,
        )
        self.repository.replace_entry(updated)
        return updated

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry by id."""
        deleted = self.repository.delete_entry(entry_id)
        if self.debug:
            _logger.info("Meal entry deleted: id=%s found=%s", entry_id, deleted)
        return deleted

    def entries_for_day(self, day: date) -> list[MealEntry]:
        """Return the entries logged on a calendar day."""
        return self._entries_between(day, day)

    def entries_for_slot(self, day: date, slot: MealSlot) -> list[MealEntry]:
        """Return the entries for one meal slot on a calendar day."""
        return aggregator.entries_for_slot(
            self._entries_between(day, day), day, slot, self.tz
        )

    def daily_summary(self, day: date) -> DailyNutritionSummary:
        """Return the day's totals with the active goals attached."""
        summary = aggregator.compute_daily_totals(
            self._entries_between(day, day),
            self.catalog_service.as_lookup(),
            day,
            self.tz,
        )
        if summary.missing_food_ids:
            _logger.warning(
                "Meal entries reference unknown foods: day=%s food_ids=%s",
                day,
                ",".join(summary.missing_food_ids),
            )
        return replace(summary, goals=self.goals_service.get_goals())

    def progress(self, day: date) -> ProgressRatios:
        """Return progress toward the active goals for a day."""
        summary = self.daily_summary(day)
        return aggregator.compute_progress(summary, summary.goals)

    def macro_percentages(self, day: date) -> MacroPercentages:
        """Return the macro calorie split for a day."""
        return aggregator.compute_macro_percentages(self.daily_summary(day))

    def weekly_averages(self, reference_day: date) -> WeeklyAverages:
        """Return averages over the 7 days ending on ``reference_day``."""
        start = reference_day - timedelta(days=aggregator.WEEK_DAYS - 1)
        return aggregator.compute_weekly_averages(
            self._entries_between(start, reference_day),
            self.catalog_service.as_lookup(),
            reference_day,
            self.tz,
        )

    def _entries_between(self, first_day: date, last_day: date) -> list[MealEntry]:
        tz = self.tz
        start = datetime.combine(first_day, time.min, tzinfo=tz)
        end = datetime.combine(last_day + timedelta(days=1), time.min, tzinfo=tz)
        return self.repository.list_entries(start.astimezone(UTC), end.astimezone(UTC))


def _validate_amount(amount_g: float) -> None:
    if not math.isfinite(amount_g) or amount_g < 0:
        raise ValueError("amount_g must be a finite, non-negative number")
