"""Supabase repository for dashboard statistics."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    FOOD_ENTRY_COLUMNS,
    WORKOUT_COLUMNS,
    parse_food_entry,
    parse_workout,
)
from fitness_tracker.domain.food import FoodEntryRecord
from fitness_tracker.domain.workouts import WorkoutRecord
from fitness_tracker.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_completed_workouts(self, user_id: UUID) -> list[WorkoutRecord]:
        """Return completed workouts, most recent first."""
        response = (
            self.client.table("workouts")
            .select(WORKOUT_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("is_routine", False)
            .not_.is_("completed_at", "null")
            .order("completed_at", desc=True)
            .execute()
        )
        return [parse_workout(row) for row in response.data or []]

    def list_food_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntryRecord]:
        """Return food entries in the time range."""
        response = (
            self.client.table("food_entries")
            .select(FOOD_ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("consumed_at", start.isoformat())
            .lt("consumed_at", end.isoformat())
            .order("consumed_at", desc=False)
            .execute()
        )
        return [parse_food_entry(row) for row in response.data or []]
