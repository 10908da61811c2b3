"""Storage for active workout session timers."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from fitness_tracker.domain.sessions import WorkoutTimer


class TimerStore(Protocol):
    """Key-value store for timers of sessions in progress."""

    def get(self, key: str) -> WorkoutTimer | None:
        """Return the timer for a key if present and not expired."""

    def put(self, key: str, timer: WorkoutTimer) -> None:
        """Store a timer, refreshing its expiry."""

    def discard(self, key: str) -> None:
        """Forget the timer for a key."""


@dataclass
class _TimerEntry:
    timer: WorkoutTimer
    expires_at: datetime


class InMemoryTimerStore(TimerStore):
    """Process-local timer store; abandoned sessions expire after a TTL."""

    def __init__(self, ttl_seconds: int) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: dict[str, _TimerEntry] = {}

    def get(self, key: str) -> WorkoutTimer | None:
        """Return a stored timer if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.timer

    def put(self, key: str, timer: WorkoutTimer) -> None:
        """Store a timer with a fresh TTL, dropping timers that have expired."""
        now = datetime.now(tz=UTC)
        expired = [
            stored_key
            for stored_key, entry in self._entries.items()
            if now >= entry.expires_at
        ]
        for stored_key in expired:
            del self._entries[stored_key]
        expires_at = now + timedelta(seconds=self.ttl_seconds)
        self._entries[key] = _TimerEntry(timer=timer, expires_at=expires_at)

    def discard(self, key: str) -> None:
        """Remove a timer if present."""
        self._entries.pop(key, None)
