"""Row parsing shared by the Supabase repositories."""

from datetime import datetime
from uuid import UUID

from fitness_tracker.domain.food import FoodEntryRecord
from fitness_tracker.domain.workouts import ExerciseRecord, WorkoutRecord

WORKOUT_COLUMNS = "id, user_id, title, completed_at, duration, is_routine, created_at"
EXERCISE_COLUMNS = "id, workout_id, name, sets, reps, weight"
WORKOUT_WITH_EXERCISES = f"{WORKOUT_COLUMNS}, exercises ({EXERCISE_COLUMNS})"
FOOD_ENTRY_COLUMNS = "id, user_id, name, calories, protein, carbs, fat, consumed_at"


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, treating empty values as missing."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_exercise(row: dict[str, object]) -> ExerciseRecord:
    weight = row.get("weight")
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        workout_id=UUID(str(row["workout_id"])),
        name=str(row["name"]),
        sets=int(row.get("sets", 1)),
        reps=int(row.get("reps", 1)),
        weight=float(weight) if weight is not None else None,
    )


def parse_workout(row: dict[str, object]) -> WorkoutRecord:
    duration = row.get("duration")
    exercises = row.get("exercises") or []
    return WorkoutRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row["title"]),
        completed_at=parse_timestamp(row.get("completed_at")),
        duration=int(duration) if duration is not None else None,
        is_routine=bool(row.get("is_routine", False)),
        created_at=parse_timestamp(row.get("created_at")),
        exercises=[parse_exercise(item) for item in exercises if isinstance(item, dict)],
    )


def parse_food_entry(row: dict[str, object]) -> FoodEntryRecord:
    consumed_at = parse_timestamp(row.get("consumed_at"))
    if consumed_at is None:
        raise RuntimeError("Food entry row is missing consumed_at")
    return FoodEntryRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row["name"]),
        calories=int(row.get("calories") or 0),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fat=_optional_float(row.get("fat")),
        consumed_at=consumed_at,
    )


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None
