"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from fitness_tracker.domain.food import NutritionTotals
from fitness_tracker.domain.workouts import WorkoutRecord


@dataclass(frozen=True)
class DashboardStats:
    """Overview shown on the dashboard."""

    day: date
    current_streak: int
    total_workouts: int
    recent_count: int
    nutrition: NutritionTotals
    recent_workouts: list[WorkoutRecord]
