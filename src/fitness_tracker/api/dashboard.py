"""Dashboard endpoint."""

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from fitness_tracker.api.deps import get_container, require_user, resolve_timezone
from fitness_tracker.api.errors import read_or_default
from fitness_tracker.api.serializers import serialize_dashboard
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import AuthContext
from fitness_tracker.services.stats import empty_dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(
    user: AuthContext = Depends(require_user),
    timezone: str = Depends(resolve_timezone),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return streak, workout counts and today's nutrition."""
    stats = read_or_default(
        lambda: container.stats_service.get_dashboard(user.user_id, timezone),
        empty_dashboard(datetime.now(tz=ZoneInfo(timezone)).date()),
        "Error fetching dashboard data",
        user_id=str(user.user_id),
    )
    return serialize_dashboard(stats)
