"""Food tracking service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fitness_tracker.domain.errors import NotFoundError, ValidationError
from fitness_tracker.domain.food import (
    FoodEntryDraft,
    FoodEntryRecord,
    FoodSearchResult,
    NutritionTotals,
)
from fitness_tracker.services.lookups import search_foods
from fitness_tracker.services.stats import aggregate_nutrition, day_bounds


class FoodRepository(Protocol):
    """Persistence interface for food entries."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntryRecord]:
        """Return entries consumed in [start, end), newest first."""

    def create_entry(
        self, user_id: UUID, draft: FoodEntryDraft, consumed_at: datetime
    ) -> FoodEntryRecord:
        """Create a food entry and return it."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an owned entry; return False when nothing was deleted."""


@dataclass
class FoodService:
    """Application service for the food tracker."""

    repository: FoodRepository

    def list_day(
        self, user_id: UUID, day: date, timezone_name: str
    ) -> list[FoodEntryRecord]:
        """Return entries consumed on a local calendar day."""
        start, end = day_bounds(day, ZoneInfo(timezone_name))
        return self.repository.list_entries(user_id, start, end)

    def day_summary(
        self, user_id: UUID, day: date, timezone_name: str
    ) -> tuple[list[FoodEntryRecord], NutritionTotals]:
        """Return a day's entries with their totals."""
        entries = self.list_day(user_id, day, timezone_name)
        return entries, aggregate_nutrition(entries)

    def add_entry(
        self,
        user_id: UUID,
        draft: FoodEntryDraft,
        consumed_at: datetime | None = None,
    ) -> FoodEntryRecord:
        """Validate and persist a food entry."""
        name = draft.name.strip()
        if not name:
            raise ValidationError("Food name is required")
        if draft.calories < 0:
            raise ValidationError("Calories cannot be negative")
        for label, value in (
            ("Protein", draft.protein),
            ("Carbs", draft.carbs),
            ("Fat", draft.fat),
        ):
            if value is not None and value < 0:
                raise ValidationError(f"{label} cannot be negative")
        clean = FoodEntryDraft(
            name=name,
            calories=draft.calories,
            protein=draft.protein,
            carbs=draft.carbs,
            fat=draft.fat,
        )
        return self.repository.create_entry(
            user_id, clean, consumed_at or datetime.now(tz=UTC)
        )

    def remove_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an owned food entry."""
        if not self.repository.delete_entry(user_id, entry_id):
            raise NotFoundError("Food entry not found")

    def search(self, query: str, limit: int = 5) -> list[FoodSearchResult]:
        """Look up foods by name."""
        return search_foods(query, limit=limit)
