"""User profile logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.models import AuthContext, Profile

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user id, if present."""

    def create_profile(self, user_id: UUID, email: str) -> Profile:
        """Create and return a new profile."""


@dataclass
class UserService:
    """Application service for user profiles."""

    repository: ProfileRepository

    def ensure_profile(self, context: AuthContext) -> Profile:
        """Return the caller's profile, creating it when signup did not."""
        existing = self.repository.get_profile(context.user_id)
        if existing:
            return existing

        logger.warning(
            "Profile missing for user; creating it",
            extra={"user_id": str(context.user_id)},
        )
        return self.repository.create_profile(context.user_id, context.email or "")
