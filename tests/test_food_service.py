"""Tests for the food tracker service and lookups."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from fitness_tracker.domain.errors import NotFoundError, ValidationError
from fitness_tracker.domain.food import FoodEntryDraft
from fitness_tracker.services.food import FoodService
from fitness_tracker.services.lookups import search_foods, suggest_exercises
from tests.conftest import InMemoryFoodRepository


def test_day_summary_uses_local_day_window() -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository)
    user_id = uuid4()
    # Berlin is UTC+2 in summer: 22:30 UTC on the 28th is the 29th locally.
    service.add_entry(
        user_id,
        FoodEntryDraft("Oatmeal", 154, protein=6, carbs=28, fat=3),
        consumed_at=datetime(2025, 6, 28, 22, 30, tzinfo=UTC),
    )
    service.add_entry(
        user_id,
        FoodEntryDraft("Apple", 95),
        consumed_at=datetime(2025, 6, 29, 12, 0, tzinfo=UTC),
    )
    service.add_entry(
        user_id,
        FoodEntryDraft("Late snack", 300),
        consumed_at=datetime(2025, 6, 29, 22, 30, tzinfo=UTC),
    )

    entries, totals = service.day_summary(user_id, date(2025, 6, 29), "Europe/Berlin")

    assert [entry.name for entry in entries] == ["Apple", "Oatmeal"]
    assert totals.calories == 249
    assert totals.protein == 6
    assert totals.carbs == 28


def test_add_entry_defaults_consumed_at_to_now() -> None:
    service = FoodService(InMemoryFoodRepository())

    entry = service.add_entry(uuid4(), FoodEntryDraft(" Egg ", 70))

    assert entry.name == "Egg"
    assert entry.consumed_at.tzinfo is not None


@pytest.mark.parametrize(
    "draft",
    [
        FoodEntryDraft("", 100),
        FoodEntryDraft("Soup", -1),
        FoodEntryDraft("Soup", 100, protein=-2),
        FoodEntryDraft("Soup", 100, fat=-0.5),
    ],
)
def test_add_entry_rejects_invalid_values(draft: FoodEntryDraft) -> None:
    repository = InMemoryFoodRepository()

    with pytest.raises(ValidationError):
        FoodService(repository).add_entry(uuid4(), draft)
    assert repository.entries == {}


def test_remove_entry_only_for_owner() -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository)
    owner = uuid4()
    entry = service.add_entry(owner, FoodEntryDraft("Rice", 205))

    with pytest.raises(NotFoundError):
        service.remove_entry(uuid4(), entry.id)
    service.remove_entry(owner, entry.id)

    assert repository.entries == {}


def test_search_foods_matches_key_and_name() -> None:
    assert [food.name for food in search_foods("BAN")] == ["Banana (medium)"]
    assert [food.name for food in search_foods("greek")] == ["Greek Yogurt (1 cup)"]


def test_search_foods_estimates_unknown_food() -> None:
    results = search_foods("Lasagna")

    assert len(results) == 1
    assert results[0].name == "Lasagna (estimated)"
    assert results[0].calories == 150
    assert results[0].fat == 6


def test_search_foods_limits_results_and_ignores_blank_query() -> None:
    assert len(search_foods("a")) == 5
    assert search_foods("  ") == []


def test_suggest_exercises_by_body_part() -> None:
    assert suggest_exercises("Chest day") == [
        "Push-ups",
        "Bench Press",
        "Dumbbell Flyes",
        "Incline Press",
        "Dips",
    ]


def test_suggest_exercises_by_keyword_deduplicates() -> None:
    assert suggest_exercises("squat") == [
        "Squats",
        "Lunges",
        "Leg Press",
        "Calf Raises",
        "Leg Curls",
    ]
    assert suggest_exercises("pull") == [
        "Pull-ups",
        "Rows",
        "Lat Pulldown",
        "Deadlifts",
        "Face Pulls",
    ]


def test_suggest_exercises_without_match() -> None:
    assert suggest_exercises("yoga") == []
    assert suggest_exercises("") == []
