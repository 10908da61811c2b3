"""Workout, routine-saving and session endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import guard_write, read_or_default
from fitness_tracker.api.schemas import WorkoutIn
from fitness_tracker.api.serializers import serialize_session, serialize_workout
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.domain.models import AuthContext
from fitness_tracker.domain.sessions import SessionState
from fitness_tracker.services.sessions import SessionStatus

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("")
async def list_workouts(
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's logged workouts."""
    workouts = read_or_default(
        lambda: container.workout_service.list_workouts(user.user_id),
        [],
        "Error fetching workouts",
        user_id=str(user.user_id),
    )
    return {"workouts": [serialize_workout(workout) for workout in workouts]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_workout(
    payload: WorkoutIn,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a workout with its exercises."""
    with guard_write("Error saving workout", user_id=str(user.user_id)):
        workout = container.workout_service.create_workout(
            user.user_id, payload.title, payload.exercise_drafts()
        )
    return serialize_workout(workout)


@router.get("/{workout_id}")
async def get_workout(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single workout with exercises."""
    workout = read_or_default(
        lambda: container.workout_service.get_workout(user.user_id, workout_id),
        None,
        "Error fetching workout",
        workout_id=str(workout_id),
    )
    if workout is None:
        raise NotFoundError("Workout not found")
    return serialize_workout(workout)


@router.put("/{workout_id}")
async def update_workout(
    workout_id: UUID,
    payload: WorkoutIn,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Replace a workout's title and exercises."""
    with guard_write("Error saving workout", workout_id=str(workout_id)):
        workout = container.workout_service.update_workout(
            user.user_id, workout_id, payload.title, payload.exercise_drafts()
        )
    return serialize_workout(workout)


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a workout and its exercises."""
    with guard_write("Error deleting workout", workout_id=str(workout_id)):
        container.workout_service.delete_workout(user.user_id, workout_id)
    return {"status": "ok"}


@router.post("/{workout_id}/routine", status_code=status.HTTP_201_CREATED)
async def save_as_routine(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Save a copy of the workout as a routine."""
    with guard_write("Error saving routine", workout_id=str(workout_id)):
        routine = container.routine_service.save_as_routine(user.user_id, workout_id)
    return serialize_workout(routine)


@router.get("/{workout_id}/session")
async def session_status(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the timer state of a workout session."""
    session = read_or_default(
        lambda: container.session_service.status(user.user_id, workout_id),
        SessionStatus(
            workout_id=workout_id,
            state=SessionState.NOT_STARTED,
            elapsed_seconds=0,
        ),
        "Error fetching workout session",
        workout_id=str(workout_id),
    )
    return serialize_session(session)


@router.post("/{workout_id}/session/start")
async def start_session(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Start the workout timer."""
    with guard_write("Error starting workout", workout_id=str(workout_id)):
        session = container.session_service.start(user.user_id, workout_id)
    return serialize_session(session)


@router.post("/{workout_id}/session/pause")
async def pause_session(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Pause the workout timer."""
    with guard_write("Error pausing workout", workout_id=str(workout_id)):
        session = container.session_service.pause(user.user_id, workout_id)
    return serialize_session(session)


@router.post("/{workout_id}/session/resume")
async def resume_session(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Resume a paused workout timer."""
    with guard_write("Error resuming workout", workout_id=str(workout_id)):
        session = container.session_service.resume(user.user_id, workout_id)
    return serialize_session(session)


@router.post("/{workout_id}/session/finish")
async def finish_session(
    workout_id: UUID,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Finish the workout and record its duration."""
    with guard_write("Error finishing workout", workout_id=str(workout_id)):
        session = container.session_service.finish(user.user_id, workout_id)
    return serialize_session(session)
