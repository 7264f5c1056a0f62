"""Loft schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoftCreate(BaseModel):
    """Create a new loft."""

    name: str = Field("", max_length=255)


class LoftUpdate(BaseModel):
    """Rename a loft."""

    name: str = Field("", max_length=255)


class LoftSummary(BaseModel):
    """Minimal loft info embedded in bird responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class LoftResponse(BaseModel):
    """Loft response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    owner_id: int
    created_at: datetime
    updated_at: datetime
    bird_count: int = 0


class BirdInLoft(BaseModel):
    """Bird listed on a loft's page."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ring: str
    name: str | None
    created_at: datetime


class LoftDetailResponse(LoftResponse):
    """Loft response including the birds housed in it."""

    birds: list[BirdInLoft] = []
