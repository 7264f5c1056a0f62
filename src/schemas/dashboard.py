"""Dashboard schemas."""

from pydantic import BaseModel

from src.schemas.bird import BirdResponse
from src.schemas.loft import LoftSummary


class DashboardResponse(BaseModel):
    """Overview of an owner's lofts and birds."""

    loft_count: int
    bird_count: int
    unassigned_count: int
    recent_lofts: list[LoftSummary]
    recent_birds: list[BirdResponse]
