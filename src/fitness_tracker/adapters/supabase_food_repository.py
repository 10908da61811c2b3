"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import FOOD_ENTRY_COLUMNS, parse_food_entry
from fitness_tracker.domain.food import FoodEntryDraft, FoodEntryRecord
from fitness_tracker.services.food import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food entries."""

    client: Client

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntryRecord]:
        """Return entries consumed in the time range, newest first."""
        response = (
            self.client.table("food_entries")
            .select(FOOD_ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("consumed_at", start.isoformat())
            .lt("consumed_at", end.isoformat())
            .order("consumed_at", desc=True)
            .execute()
        )
        return [parse_food_entry(row) for row in response.data or []]

    def create_entry(
        self, user_id: UUID, draft: FoodEntryDraft, consumed_at: datetime
    ) -> FoodEntryRecord:
        """Insert a food entry row and return it."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": draft.name,
                    "calories": draft.calories,
                    "protein": draft.protein,
                    "carbs": draft.carbs,
                    "fat": draft.fat,
                    "consumed_at": consumed_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return parse_food_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an owned entry and report whether a row was removed."""
        response = (
            self.client.table("food_entries")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)
