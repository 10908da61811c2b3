"""Pydantic request models."""

from datetime import datetime

from pydantic import BaseModel, Field

from fitness_tracker.domain.food import FoodEntryDraft
from fitness_tracker.domain.workouts import ExerciseDraft


class ExerciseIn(BaseModel):
    """Exercise payload."""

    name: str
    sets: int = Field(default=3, gt=0)
    reps: int = Field(default=10, gt=0)
    weight: float | None = Field(default=None, ge=0)

    def to_draft(self) -> ExerciseDraft:
        return ExerciseDraft(
            name=self.name, sets=self.sets, reps=self.reps, weight=self.weight
        )


class WorkoutIn(BaseModel):
    """Workout create/update payload."""

    title: str
    exercises: list[ExerciseIn] = Field(default_factory=list)

    def exercise_drafts(self) -> list[ExerciseDraft]:
        return [exercise.to_draft() for exercise in self.exercises]


class FoodEntryIn(BaseModel):
    """Food entry payload."""

    name: str
    calories: int = Field(ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    consumed_at: datetime | None = None

    def to_draft(self) -> FoodEntryDraft:
        return FoodEntryDraft(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


class PasswordChangeIn(BaseModel):
    """Password change payload."""

    new_password: str
    confirm_password: str
