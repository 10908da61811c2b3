"""Exercise suggestion endpoint."""

from fastapi import APIRouter, Depends

from fitness_tracker.api.deps import require_user
from fitness_tracker.domain.models import AuthContext
from fitness_tracker.services.lookups import suggest_exercises

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("/suggestions")
async def exercise_suggestions(
    q: str = "", user: AuthContext = Depends(require_user)
) -> dict[str, list[str]]:
    """Suggest exercise names for a body part or movement."""
    return {"suggestions": suggest_exercises(q)}
