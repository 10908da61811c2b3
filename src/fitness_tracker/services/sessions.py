"""Workout session timing and completion."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from fitness_tracker.domain.errors import NotFoundError, SessionStateError
from fitness_tracker.domain.sessions import SessionState, WorkoutTimer
from fitness_tracker.domain.workouts import WorkoutRecord
from fitness_tracker.services.timer_store import TimerStore
from fitness_tracker.services.workouts import WorkoutRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionStatus:
    """Snapshot of a workout session."""

    workout_id: UUID
    state: SessionState
    elapsed_seconds: int
    completed_at: datetime | None = None


@dataclass
class SessionService:
    """Drives the timer of a workout and records its completion."""

    repository: WorkoutRepository
    store: TimerStore
    clock: Callable[[], float] = field(default=time.monotonic)

    def status(self, user_id: UUID, workout_id: UUID) -> SessionStatus:
        """Return the current state of a workout session."""
        workout = self._get_workout(user_id, workout_id)
        if workout.completed_at is not None:
            return SessionStatus(
                workout_id=workout_id,
                state=SessionState.FINISHED,
                elapsed_seconds=workout.duration or 0,
                completed_at=workout.completed_at,
            )
        timer = self.store.get(_key(user_id, workout_id))
        if timer is None:
            return SessionStatus(
                workout_id=workout_id,
                state=SessionState.NOT_STARTED,
                elapsed_seconds=0,
            )
        return _snapshot(workout_id, timer)

    def start(self, user_id: UUID, workout_id: UUID) -> SessionStatus:
        """Start the timer for a workout that is not completed yet."""
        workout = self._get_workout(user_id, workout_id)
        if workout.is_routine:
            raise SessionStateError("Routines cannot be started directly")
        if workout.completed_at is not None:
            raise SessionStateError("Workout is already completed")
        key = _key(user_id, workout_id)
        timer = self.store.get(key) or WorkoutTimer(clock=self.clock)
        timer.start()
        self.store.put(key, timer)
        return _snapshot(workout_id, timer)

    def pause(self, user_id: UUID, workout_id: UUID) -> SessionStatus:
        """Pause a running session."""
        key, timer = self._active_timer(user_id, workout_id)
        timer.pause()
        self.store.put(key, timer)
        return _snapshot(workout_id, timer)

    def resume(self, user_id: UUID, workout_id: UUID) -> SessionStatus:
        """Resume a paused session."""
        key, timer = self._active_timer(user_id, workout_id)
        timer.resume()
        self.store.put(key, timer)
        return _snapshot(workout_id, timer)

    def finish(self, user_id: UUID, workout_id: UUID) -> SessionStatus:
        """Stop the timer and persist completion time and duration together."""
        key, timer = self._active_timer(user_id, workout_id)
        duration = timer.finish()
        completed_at = datetime.now(tz=UTC)
        try:
            updated = self.repository.complete_workout(
                user_id, workout_id, completed_at=completed_at, duration=duration
            )
        except Exception:
            timer.state = SessionState.PAUSED
            self.store.put(key, timer)
            raise
        self.store.discard(key)
        if not updated:
            raise SessionStateError("Workout is already completed")
        logger.info(
            "Workout completed",
            extra={"workout_id": str(workout_id), "duration": duration},
        )
        return SessionStatus(
            workout_id=workout_id,
            state=SessionState.FINISHED,
            elapsed_seconds=duration,
            completed_at=completed_at,
        )

    def _get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord:
        workout = self.repository.get_workout(user_id, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found")
        return workout

    def _active_timer(self, user_id: UUID, workout_id: UUID) -> tuple[str, WorkoutTimer]:
        self._get_workout(user_id, workout_id)
        key = _key(user_id, workout_id)
        timer = self.store.get(key)
        if timer is None:
            raise SessionStateError("Session has not been started")
        return key, timer


def _key(user_id: UUID, workout_id: UUID) -> str:
    return f"{user_id}:{workout_id}"


def _snapshot(workout_id: UUID, timer: WorkoutTimer) -> SessionStatus:
    return SessionStatus(
        workout_id=workout_id,
        state=timer.state,
        elapsed_seconds=timer.elapsed_seconds,
    )
