"""Food tracker endpoints."""

from datetime import UTC, date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, status

from fitness_tracker.api.deps import get_container, require_user, resolve_timezone
from fitness_tracker.api.errors import guard_write, read_or_default
from fitness_tracker.api.schemas import FoodEntryIn
from fitness_tracker.api.serializers import (
    serialize_food_entry,
    serialize_search_result,
    serialize_totals,
)
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import AuthContext
from fitness_tracker.services.stats import aggregate_nutrition

router = APIRouter(prefix="/food", tags=["food"])


@router.get("")
async def list_food_entries(
    day: date | None = None,
    user: AuthContext = Depends(require_user),
    timezone: str = Depends(resolve_timezone),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's food entries and their totals."""
    selected_day = day or datetime.now(tz=ZoneInfo(timezone)).date()
    entries = read_or_default(
        lambda: container.food_service.list_day(user.user_id, selected_day, timezone),
        [],
        "Error fetching food entries",
        user_id=str(user.user_id),
    )
    return {
        "day": selected_day.isoformat(),
        "entries": [serialize_food_entry(entry) for entry in entries],
        "totals": serialize_totals(aggregate_nutrition(entries)),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_food_entry(
    payload: FoodEntryIn,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a consumed food item."""
    consumed_at = payload.consumed_at
    if consumed_at is not None and consumed_at.tzinfo is None:
        consumed_at = consumed_at.replace(tzinfo=UTC)
    with guard_write("Error adding food entry", user_id=str(user.user_id)):
        entry = container.food_service.add_entry(
            user.user_id, payload.to_draft(), consumed_at=consumed_at
        )
    return serialize_food_entry(entry)


@router.get("/search")
async def search_food(
    q: str = "",
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Look up foods by name."""
    results = container.food_service.search(q)
    return {"results": [serialize_search_result(result) for result in results]}


@router.delete("/{entry_id}")
async def remove_food_entry(
    entry_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a food entry."""
    with guard_write("Error removing food entry", entry_id=str(entry_id)):
        container.food_service.remove_entry(user.user_id, entry_id)
    return {"status": "ok"}
