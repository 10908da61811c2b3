"""Supabase repository for workouts, routines and exercises."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    WORKOUT_WITH_EXERCISES,
    parse_exercise,
    parse_workout,
)
from fitness_tracker.domain.workouts import ExerciseDraft, ExerciseRecord, WorkoutRecord
from fitness_tracker.services.workouts import WorkoutRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workouts and their exercises."""

    client: Client

    def list_workouts(self, user_id: UUID, is_routine: bool) -> list[WorkoutRecord]:
        """Return workouts or routines with exercises, newest first."""
        response = (
            self.client.table("workouts")
            .select(WORKOUT_WITH_EXERCISES)
            .eq("user_id", str(user_id))
            .eq("is_routine", is_routine)
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_workout(row) for row in response.data or []]

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord | None:
        """Return an owned workout with exercises, if present."""
        response = (
            self.client.table("workouts")
            .select(WORKOUT_WITH_EXERCISES)
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_workout(response.data[0])

    def create_workout(
        self,
        user_id: UUID,
        title: str,
        is_routine: bool,
        exercises: list[ExerciseDraft],
    ) -> WorkoutRecord:
        """Insert a workout and its exercises, removing the workout on failure."""
        response = (
            self.client.table("workouts")
            .insert({"user_id": str(user_id), "title": title, "is_routine": is_routine})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout")
        workout = parse_workout(response.data[0])
        try:
            records = self._insert_exercises(workout.id, exercises)
        except Exception:
            logger.exception(
                "Failed to insert exercises; removing workout",
                extra={"workout_id": str(workout.id)},
            )
            self.client.table("workouts").delete().eq("id", str(workout.id)).execute()
            raise
        return WorkoutRecord(
            id=workout.id,
            user_id=workout.user_id,
            title=workout.title,
            completed_at=workout.completed_at,
            duration=workout.duration,
            is_routine=workout.is_routine,
            created_at=workout.created_at,
            exercises=records,
        )

    def update_workout(
        self,
        user_id: UUID,
        workout_id: UUID,
        title: str,
        exercises: list[ExerciseDraft],
    ) -> WorkoutRecord:
        """Update the title and replace all exercises of a workout.

        If the new exercises cannot be inserted, the previous title and
        exercises are written back before the error is re-raised.
        """
        current = self.get_workout(user_id, workout_id)
        if current is None:
            raise RuntimeError("Workout not found for update")
        self._set_title(user_id, workout_id, title)
        self._delete_exercises(workout_id)
        try:
            self._insert_exercises(workout_id, exercises)
        except Exception:
            logger.exception(
                "Failed to replace exercises; restoring previous workout",
                extra={"workout_id": str(workout_id)},
            )
            self._set_title(user_id, workout_id, current.title)
            self._insert_exercises(
                workout_id, [exercise.to_draft() for exercise in current.exercises]
            )
            raise
        updated = self.get_workout(user_id, workout_id)
        if updated is None:
            raise RuntimeError("Workout disappeared during update")
        return updated

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> None:
        """Delete a workout row; exercises cascade."""
        self.client.table("workouts").delete().eq("id", str(workout_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def complete_workout(
        self,
        user_id: UUID,
        workout_id: UUID,
        completed_at: datetime,
        duration: int,
    ) -> bool:
        """Record completion in a single update guarded on completed_at IS NULL."""
        response = (
            self.client.table("workouts")
            .update(
                {
                    "completed_at": completed_at.isoformat(),
                    "duration": duration,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .is_("completed_at", "null")
            .execute()
        )
        return bool(response.data)

    def _set_title(self, user_id: UUID, workout_id: UUID, title: str) -> None:
        self.client.table("workouts").update(
            {"title": title, "updated_at": datetime.now(tz=UTC).isoformat()}
        ).eq("id", str(workout_id)).eq("user_id", str(user_id)).execute()

    def _delete_exercises(self, workout_id: UUID) -> None:
        self.client.table("exercises").delete().eq(
            "workout_id", str(workout_id)
        ).execute()

    def _insert_exercises(
        self, workout_id: UUID, exercises: list[ExerciseDraft]
    ) -> list[ExerciseRecord]:
        if not exercises:
            return []
        payload = [
            {
                "workout_id": str(workout_id),
                "name": exercise.name,
                "sets": exercise.sets,
                "reps": exercise.reps,
                "weight": exercise.weight,
            }
            for exercise in exercises
        ]
        response = self.client.table("exercises").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create exercises")
        return [parse_exercise(row) for row in response.data]
