"""Request dependencies: container access, caller authentication, timezone."""

from fastapi import Depends, Header, HTTPException, Request, status

from fitness_tracker.config import is_valid_timezone
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import ValidationError
from fitness_tracker.domain.models import AuthContext

_BEARER_PREFIX = "bearer "


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> AuthContext:
    """Resolve the caller from a Supabase bearer token."""
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise unauthorized
    context = container.auth_service.authenticate(
        authorization[len(_BEARER_PREFIX) :]
    )
    if context is None:
        raise unauthorized
    return context


def resolve_timezone(
    tz: str | None = None,
    container: AppContainer = Depends(get_container),
) -> str:
    """Return the requested timezone or the configured default."""
    timezone = tz or container.settings.default_timezone
    if not is_valid_timezone(timezone):
        raise ValidationError(f"Unknown timezone: {timezone}")
    return timezone
