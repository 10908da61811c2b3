"""Workout management services."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import NotFoundError, ValidationError
from fitness_tracker.domain.workouts import ExerciseDraft, WorkoutRecord

logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts and their exercises."""

    def list_workouts(self, user_id: UUID, is_routine: bool) -> list[WorkoutRecord]:
        """Return workouts or routines with exercises, newest first."""

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord | None:
        """Return an owned workout with exercises, if present."""

    def create_workout(
        self,
        user_id: UUID,
        title: str,
        is_routine: bool,
        exercises: list[ExerciseDraft],
    ) -> WorkoutRecord:
        """Create a workout together with its exercises and return it.

        Implementations must not leave a workout without its exercises behind
        when the exercise insert fails.
        """

    def update_workout(
        self,
        user_id: UUID,
        workout_id: UUID,
        title: str,
        exercises: list[ExerciseDraft],
    ) -> WorkoutRecord:
        """Update a workout title and replace its exercises."""

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> None:
        """Delete a workout; its exercises are removed with it."""

    def complete_workout(
        self,
        user_id: UUID,
        workout_id: UUID,
        completed_at: datetime,
        duration: int,
    ) -> bool:
        """Set completion time and duration once; return False if already set."""


@dataclass
class WorkoutService:
    """Application service for concrete workouts."""

    repository: WorkoutRepository

    def list_workouts(self, user_id: UUID) -> list[WorkoutRecord]:
        """Return the user's logged workouts, newest first."""
        return self.repository.list_workouts(user_id, is_routine=False)

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord:
        """Return an owned workout or raise NotFoundError."""
        workout = self.repository.get_workout(user_id, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found")
        return workout

    def create_workout(
        self, user_id: UUID, title: str, exercises: list[ExerciseDraft]
    ) -> WorkoutRecord:
        """Validate and persist a new workout with its exercises."""
        clean_title, drafts = validate_workout(title, exercises)
        workout = self.repository.create_workout(
            user_id, clean_title, is_routine=False, exercises=drafts
        )
        logger.info(
            "Workout created",
            extra={"user_id": str(user_id), "workout_id": str(workout.id)},
        )
        return workout

    def update_workout(
        self,
        user_id: UUID,
        workout_id: UUID,
        title: str,
        exercises: list[ExerciseDraft],
    ) -> WorkoutRecord:
        """Update the title and exercises of an owned workout."""
        clean_title, drafts = validate_workout(title, exercises)
        self.get_workout(user_id, workout_id)
        return self.repository.update_workout(
            user_id, workout_id, clean_title, drafts
        )

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> None:
        """Delete an owned workout."""
        self.get_workout(user_id, workout_id)
        self.repository.delete_workout(user_id, workout_id)


def validate_workout(
    title: str, exercises: list[ExerciseDraft]
) -> tuple[str, list[ExerciseDraft]]:
    """Return the trimmed title and exercises or raise ValidationError."""
    clean_title = title.strip()
    if not clean_title or not exercises:
        raise ValidationError("Please add a title and at least one exercise")
    drafts = []
    for exercise in exercises:
        name = exercise.name.strip()
        if not name:
            raise ValidationError("Exercise name is required")
        if exercise.sets <= 0 or exercise.reps <= 0:
            raise ValidationError(f"Sets and reps for {name} must be positive")
        if exercise.weight is not None and exercise.weight < 0:
            raise ValidationError(f"Weight for {name} cannot be negative")
        drafts.append(
            ExerciseDraft(
                name=name, sets=exercise.sets, reps=exercise.reps, weight=exercise.weight
            )
        )
    return clean_title, drafts
