"""Food tracking domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodEntryDraft:
    """Food entry values supplied by the user."""

    name: str
    calories: int
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


@dataclass(frozen=True)
class FoodEntryRecord:
    """Represents a consumed food item."""

    id: UUID
    user_id: UUID
    name: str
    calories: int
    protein: float | None
    carbs: float | None
    fat: float | None
    consumed_at: datetime


@dataclass(frozen=True)
class NutritionTotals:
    """Summed calories and macros."""

    calories: int
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class FoodSearchResult:
    """Food lookup result with macros per listed portion."""

    name: str
    calories: int
    protein: float
    carbs: float
    fat: float

    def to_draft(self) -> FoodEntryDraft:
        """Return a draft entry for this result."""
        return FoodEntryDraft(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )
