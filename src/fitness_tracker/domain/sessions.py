"""Workout session timer state machine."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from fitness_tracker.domain.errors import SessionStateError


class SessionState(str, Enum):
    """Lifecycle states of a workout session."""

    NOT_STARTED = "NOT_STARTED"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    FINISHED = "FINISHED"


@dataclass
class WorkoutTimer:
    """Tracks elapsed time for a single workout session.

    Pausing freezes the elapsed time. Resuming moves the start instant to
    ``now - elapsed`` so time accumulates across any number of pause cycles.
    ``FINISHED`` is terminal.
    """

    clock: Callable[[], float] = time.monotonic
    state: SessionState = SessionState.NOT_STARTED
    _started_at: float | None = field(default=None, repr=False)
    _elapsed: float = field(default=0.0, repr=False)

    @property
    def elapsed(self) -> float:
        """Return elapsed seconds, live while running."""
        if self.state is SessionState.RUNNING and self._started_at is not None:
            return self.clock() - self._started_at
        return self._elapsed

    @property
    def elapsed_seconds(self) -> int:
        """Return elapsed time truncated to whole seconds."""
        return int(self.elapsed)

    def start(self) -> None:
        """Start timing a session that has not started yet."""
        self._require(SessionState.NOT_STARTED, action="start")
        self._started_at = self.clock()
        self._elapsed = 0.0
        self.state = SessionState.RUNNING

    def pause(self) -> None:
        """Freeze the elapsed time of a running session."""
        self._require(SessionState.RUNNING, action="pause")
        self._elapsed = self.elapsed
        self._started_at = None
        self.state = SessionState.PAUSED

    def resume(self) -> None:
        """Continue a paused session."""
        self._require(SessionState.PAUSED, action="resume")
        self._started_at = self.clock() - self._elapsed
        self.state = SessionState.RUNNING

    def finish(self) -> int:
        """Stop the session and return the elapsed whole seconds."""
        self._require(SessionState.RUNNING, SessionState.PAUSED, action="finish")
        self._elapsed = self.elapsed
        self._started_at = None
        self.state = SessionState.FINISHED
        return int(self._elapsed)

    def _require(self, *allowed: SessionState, action: str) -> None:
        if self.state not in allowed:
            raise SessionStateError(
                f"Cannot {action} a session that is {self.state.value.lower()}"
            )
