"""Routine endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import guard_write, read_or_default
from fitness_tracker.api.serializers import serialize_workout
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import AuthContext

router = APIRouter(prefix="/routines", tags=["routines"])


@router.get("")
async def list_routines(
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's routines."""
    routines = read_or_default(
        lambda: container.routine_service.list_routines(user.user_id),
        [],
        "Error fetching routines",
        user_id=str(user.user_id),
    )
    return {"routines": [serialize_workout(routine) for routine in routines]}


@router.post("/{routine_id}/start", status_code=status.HTTP_201_CREATED)
async def start_routine(
    routine_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a new workout from a routine, ready to be started."""
    with guard_write("Error starting workout", routine_id=str(routine_id)):
        workout = container.routine_service.start_routine(user.user_id, routine_id)
    return serialize_workout(workout)
