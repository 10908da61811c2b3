"""Domain models for workouts, routines and exercises."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ExerciseDraft:
    """Exercise values supplied when creating or editing a workout."""

    name: str
    sets: int = 3
    reps: int = 10
    weight: float | None = None


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise row owned by a single workout."""

    id: UUID
    workout_id: UUID
    name: str
    sets: int
    reps: int
    weight: float | None

    def to_draft(self) -> ExerciseDraft:
        """Return the values needed to copy this exercise elsewhere."""
        return ExerciseDraft(
            name=self.name, sets=self.sets, reps=self.reps, weight=self.weight
        )


@dataclass(frozen=True)
class WorkoutRecord:
    """Represents a logged workout or a reusable routine template."""

    id: UUID
    user_id: UUID
    title: str
    completed_at: datetime | None
    duration: int | None
    is_routine: bool
    created_at: datetime | None = None
    exercises: list[ExerciseRecord] = field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        """Return True once the workout has a completion timestamp."""
        return self.completed_at is not None
