"""Access token validation and password changes."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import ValidationError
from fitness_tracker.domain.models import AuthContext

PASSWORD_MIN_LENGTH = 6


class AuthClient(Protocol):
    """Interface to the hosted authentication service."""

    def get_user(self, access_token: str) -> AuthContext | None:
        """Return the user owning an access token, or None if it is invalid."""

    def update_password(self, user_id: UUID, password: str) -> None:
        """Set a new password for a user."""


@dataclass
class AuthService:
    """Service resolving callers and managing credentials."""

    client: AuthClient
    password_min_length: int = PASSWORD_MIN_LENGTH

    def authenticate(self, access_token: str) -> AuthContext | None:
        """Return the caller's context for a bearer token."""
        token = access_token.strip()
        if not token:
            return None
        return self.client.get_user(token)

    def change_password(
        self, context: AuthContext, new_password: str, confirm_password: str
    ) -> None:
        """Validate and apply a password change for the caller."""
        if new_password != confirm_password:
            raise ValidationError("New passwords do not match")
        if len(new_password) < self.password_min_length:
            raise ValidationError(
                "New password must be at least "
                f"{self.password_min_length} characters long"
            )
        self.client.update_password(context.user_id, new_password)
