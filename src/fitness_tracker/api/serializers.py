"""Conversion of domain objects into JSON payloads."""

from datetime import datetime

from fitness_tracker.domain.food import FoodEntryRecord, FoodSearchResult, NutritionTotals
from fitness_tracker.domain.models import Profile
from fitness_tracker.domain.stats import DashboardStats
from fitness_tracker.domain.workouts import ExerciseRecord, WorkoutRecord
from fitness_tracker.services.sessions import SessionStatus


def serialize_exercise(exercise: ExerciseRecord) -> dict[str, object]:
    return {
        "id": str(exercise.id),
        "name": exercise.name,
        "sets": exercise.sets,
        "reps": exercise.reps,
        "weight": exercise.weight,
    }


def serialize_workout(workout: WorkoutRecord) -> dict[str, object]:
    return {
        "id": str(workout.id),
        "title": workout.title,
        "completed_at": _isoformat(workout.completed_at),
        "duration": workout.duration,
        "is_routine": workout.is_routine,
        "created_at": _isoformat(workout.created_at),
        "exercises": [serialize_exercise(exercise) for exercise in workout.exercises],
    }


def serialize_food_entry(entry: FoodEntryRecord) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "consumed_at": _isoformat(entry.consumed_at),
    }


def serialize_totals(totals: NutritionTotals) -> dict[str, object]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
    }


def serialize_search_result(result: FoodSearchResult) -> dict[str, object]:
    return {
        "name": result.name,
        "calories": result.calories,
        "protein": result.protein,
        "carbs": result.carbs,
        "fat": result.fat,
    }


def serialize_dashboard(stats: DashboardStats) -> dict[str, object]:
    return {
        "day": stats.day.isoformat(),
        "current_streak": stats.current_streak,
        "total_workouts": stats.total_workouts,
        "recent_count": stats.recent_count,
        "nutrition": serialize_totals(stats.nutrition),
        "recent_workouts": [
            {
                "id": str(workout.id),
                "title": workout.title,
                "completed_at": _isoformat(workout.completed_at),
                "duration": workout.duration,
            }
            for workout in stats.recent_workouts
        ],
    }


def serialize_session(session: SessionStatus) -> dict[str, object]:
    return {
        "workout_id": str(session.workout_id),
        "state": session.state.value,
        "elapsed_seconds": session.elapsed_seconds,
        "completed_at": _isoformat(session.completed_at),
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "id": str(profile.id),
        "email": profile.email,
        "created_at": _isoformat(profile.created_at),
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
