"""Profile and password endpoints."""

from fastapi import APIRouter, Depends

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import guard_write, read_or_default
from fitness_tracker.api.schemas import PasswordChangeIn
from fitness_tracker.api.serializers import serialize_profile
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import AuthContext, Profile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's account information."""
    profile = read_or_default(
        lambda: container.user_service.ensure_profile(user),
        Profile(id=user.user_id, email=user.email or ""),
        "Error fetching profile",
        user_id=str(user.user_id),
    )
    return serialize_profile(profile)


@router.post("/password")
async def change_password(
    payload: PasswordChangeIn,
    user: AuthContext = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Change the caller's password."""
    with guard_write("Error changing password", user_id=str(user.user_id)):
        container.auth_service.change_password(
            user, payload.new_password, payload.confirm_password
        )
    return {"status": "ok"}
