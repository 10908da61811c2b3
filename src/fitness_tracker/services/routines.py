"""Routine templates and cloning between routines and workouts."""

from dataclasses import dataclass
from uuid import UUID

from fitness_tracker.domain.errors import NotFoundError, ValidationError
from fitness_tracker.domain.workouts import WorkoutRecord
from fitness_tracker.services.workouts import WorkoutRepository

ROUTINE_SUFFIX = " (Routine)"


@dataclass
class RoutineService:
    """Application service for routine templates."""

    repository: WorkoutRepository

    def list_routines(self, user_id: UUID) -> list[WorkoutRecord]:
        """Return the user's routines, newest first."""
        return self.repository.list_workouts(user_id, is_routine=True)

    def start_routine(self, user_id: UUID, routine_id: UUID) -> WorkoutRecord:
        """Create a concrete workout from a routine and return it."""
        routine = self.repository.get_workout(user_id, routine_id)
        if routine is None or not routine.is_routine:
            raise NotFoundError("Routine not found")
        return self.repository.create_workout(
            user_id,
            routine.title,
            is_routine=False,
            exercises=[exercise.to_draft() for exercise in routine.exercises],
        )

    def save_as_routine(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord:
        """Copy a workout and its exercises into a new routine."""
        workout = self.repository.get_workout(user_id, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found")
        if workout.is_routine:
            raise ValidationError("Workout is already a routine")
        return self.repository.create_workout(
            user_id,
            f"{workout.title}{ROUTINE_SUFFIX}",
            is_routine=True,
            exercises=[exercise.to_draft() for exercise in workout.exercises],
        )
