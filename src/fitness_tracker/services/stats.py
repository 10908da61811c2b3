"""Workout and nutrition statistics."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fitness_tracker.domain.food import FoodEntryRecord, NutritionTotals
from fitness_tracker.domain.stats import DashboardStats
from fitness_tracker.domain.workouts import WorkoutRecord

RECENT_WINDOW_DAYS = 7
RECENT_WORKOUTS_LIMIT = 5


class StatsRepository(Protocol):
    """Persistence interface for dashboard statistics."""

    def list_completed_workouts(self, user_id: UUID) -> list[WorkoutRecord]:
        """Return completed workouts, most recent completion first."""

    def list_food_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntryRecord]:
        """Return food entries consumed within a time range."""


def compute_streak(
    records: Iterable[WorkoutRecord], reference_date: date, tz: tzinfo = UTC
) -> int:
    """Count consecutive days with a completed workout, ending on reference_date.

    No completion on the reference date means no streak. After that, each
    earlier distinct day must be exactly one day before the previous one; the
    first larger gap ends the streak.
    """
    days = sorted(
        {day for day in _completion_days(records, tz) if day <= reference_date},
        reverse=True,
    )
    if not days or days[0] != reference_date:
        return 0

    streak = 1
    for previous, current in zip(days, days[1:], strict=False):
        if previous - current != timedelta(days=1):
            break
        streak += 1
    return streak


def count_recent(
    records: Iterable[WorkoutRecord],
    reference_date: date,
    window_days: int,
    tz: tzinfo = UTC,
) -> int:
    """Count completions less than window_days calendar days before reference_date.

    Completions on the reference date count; one exactly window_days days
    earlier does not. Completions after the reference date are ignored.
    """
    count = 0
    for day in _completion_days(records, tz):
        if 0 <= (reference_date - day).days < window_days:
            count += 1
    return count


def aggregate_nutrition(entries: Iterable[FoodEntryRecord]) -> NutritionTotals:
    """Sum calories and macros; a missing macro adds nothing to its total."""
    calories = 0
    protein = carbs = fat = 0.0
    for entry in entries:
        calories += entry.calories
        protein += entry.protein or 0.0
        carbs += entry.carbs or 0.0
        fat += entry.fat or 0.0
    return NutritionTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)


def day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return the UTC start and end of a local calendar day."""
    start = datetime.combine(day, datetime.min.time(), tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), datetime.min.time(), tzinfo=tz)
    return start.astimezone(UTC), end.astimezone(UTC)


@dataclass
class StatsService:
    """Service assembling the dashboard for a user's timezone."""

    repository: StatsRepository
    window_days: int = RECENT_WINDOW_DAYS
    recent_limit: int = RECENT_WORKOUTS_LIMIT

    def get_dashboard(
        self, user_id: UUID, timezone_name: str, now: datetime | None = None
    ) -> DashboardStats:
        """Return streak, counts and today's nutrition for a user."""
        tz = ZoneInfo(timezone_name)
        today = (now or datetime.now(tz=UTC)).astimezone(tz).date()
        workouts = [
            workout
            for workout in self.repository.list_completed_workouts(user_id)
            if workout.completed_at is not None and not workout.is_routine
        ]
        workouts.sort(key=lambda workout: workout.completed_at, reverse=True)
        start, end = day_bounds(today, tz)
        entries = self.repository.list_food_entries(user_id, start, end)
        return DashboardStats(
            day=today,
            current_streak=compute_streak(workouts, today, tz),
            total_workouts=len(workouts),
            recent_count=count_recent(workouts, today, self.window_days, tz),
            nutrition=aggregate_nutrition(entries),
            recent_workouts=workouts[: self.recent_limit],
        )


def empty_dashboard(day: date) -> DashboardStats:
    """Return the dashboard shown when statistics cannot be loaded."""
    return DashboardStats(
        day=day,
        current_streak=0,
        total_workouts=0,
        recent_count=0,
        nutrition=NutritionTotals(calories=0, protein=0.0, carbs=0.0, fat=0.0),
        recent_workouts=[],
    )


def _completion_days(records: Iterable[WorkoutRecord], tz: tzinfo) -> list[date]:
    return [
        _local_day(record.completed_at, tz)
        for record in records
        if record.completed_at is not None
    ]


def _local_day(moment: datetime, tz: tzinfo) -> date:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(tz).date()
