"""Supabase Auth client."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from fitness_tracker.domain.errors import AuthUnavailableError
from fitness_tracker.domain.models import AuthContext
from fitness_tracker.services.auth import AuthClient

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Validates access tokens and updates credentials via Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> AuthContext | None:
        """Resolve the user for an access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        except Exception as exc:
            logger.exception("Failed to verify access token")
            raise AuthUnavailableError(
                "Could not verify your session. Please try again."
            ) from exc
        if response is None or response.user is None:
            return None
        return AuthContext(
            user_id=UUID(str(response.user.id)),
            email=response.user.email,
            access_token=access_token,
        )

    def update_password(self, user_id: UUID, password: str) -> None:
        """Set a user's password through the admin API."""
        self.client.auth.admin.update_user_by_id(str(user_id), {"password": password})
