"""In-memory meal entry log."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from fittracker.domain.meals import MealEntry
from fittracker.services.meals import MealLogRepository


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """Meal entries held in process memory, in insertion order."""

    entries: dict[UUID, MealEntry] = field(default_factory=dict)

    def add_entry(self, entry: MealEntry) -> None:
        self.entries[entry.id] = entry

    def replace_entry(self, entry: MealEntry) -> None:
        if entry.id not in self.entries:
            raise KeyError(entry.id)
        self.entries[entry.id] = entry

    def get_entry(self, entry_id: UUID) -> MealEntry | None:
        return self.entries.get(entry_id)

    def delete_entry(self, entry_id: UUID) -> bool:
        return self.entries.pop(entry_id, None) is not None

    def list_entries(self, start: datetime, end: datetime) -> list[MealEntry]:
        return [
            entry for entry in self.entries.values() if start <= entry.logged_at < end
        ]
