"""SQLAlchemy models."""

from src.models.bird import Bird
from src.models.enums import RecordStatus
from src.models.loft import Loft
from src.models.user import User

__all__ = [
    "User",
    "Loft",
    "Bird",
    "RecordStatus",
]
