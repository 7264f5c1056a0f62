"""Bird schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.loft import LoftSummary

# Form clients send this in place of a loft id to mean "no loft"
UNASSIGNED = "none"


class BirdCreate(BaseModel):
    """Create a new bird."""

    ring: str | None = Field(None, max_length=64)
    name: str | None = Field(None, max_length=60)
    loft_id: int | None = None


class BirdUpdate(BaseModel):
    """Edit a bird. A null or "none" loft_id leaves the bird unassigned."""

    ring: str | None = Field(None, max_length=64)
    name: str | None = Field(None, max_length=60)
    loft_id: int | Literal["none"] | None = None


class BirdAssign(BaseModel):
    """Move a bird into a loft, or out of any loft with a null loft_id."""

    bird_id: int | None = None
    loft_id: int | None = None


class BirdResponse(BaseModel):
    """Bird response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ring: str
    name: str | None
    owner_id: int
    loft_id: int | None
    loft: LoftSummary | None = None
    created_at: datetime
    updated_at: datetime
