"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from src.schemas.bird import BirdAssign, BirdCreate, BirdResponse, BirdUpdate
from src.schemas.dashboard import DashboardResponse
from src.schemas.loft import (
    LoftCreate,
    LoftDetailResponse,
    LoftResponse,
    LoftSummary,
    LoftUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "LoftCreate",
    "LoftUpdate",
    "LoftSummary",
    "LoftResponse",
    "LoftDetailResponse",
    "BirdCreate",
    "BirdUpdate",
    "BirdAssign",
    "BirdResponse",
    "DashboardResponse",
]
