"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_bird_service, get_current_user, get_loft_service
from src.models.user import User
from src.schemas.bird import BirdResponse
from src.schemas.dashboard import DashboardResponse
from src.schemas.loft import LoftSummary
from src.services.bird_service import BirdService
from src.services.loft_service import LoftService

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])

RECENT_LIMIT = 5


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
    loft_service: Annotated[LoftService, Depends(get_loft_service)],
    bird_service: Annotated[BirdService, Depends(get_bird_service)],
):
    """Get counts and the most recent lofts and birds for the current user."""
    lofts = loft_service.list_lofts(current_user.id)
    recent_birds = bird_service.list_birds(current_user.id, limit=RECENT_LIMIT)

    return DashboardResponse(
        loft_count=len(lofts),
        bird_count=bird_service.count_birds(current_user.id),
        unassigned_count=bird_service.count_birds(current_user.id, unassigned=True),
        recent_lofts=[LoftSummary.model_validate(loft) for loft in lofts[:RECENT_LIMIT]],
        recent_birds=[BirdResponse.model_validate(bird) for bird in recent_birds],
    )
