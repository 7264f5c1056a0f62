"""Bird API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_bird_service, get_current_user
from src.models.user import User
from src.schemas.bird import BirdAssign, BirdCreate, BirdResponse, BirdUpdate
from src.services.bird_service import BirdService

router = APIRouter(prefix="/api/v1/birds", tags=["birds"])


@router.get("", response_model=list[BirdResponse])
def get_birds(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
    loft_id: int | None = Query(default=None, description="Only birds in this loft"),
    unassigned: bool = Query(default=False, description="Only birds without a loft"),
):
    """Get all birds owned by the current user with their lofts, newest first."""
    return service.list_birds(current_user.id, loft_id=loft_id, unassigned=unassigned)


@router.post("", response_model=BirdResponse, status_code=status.HTTP_201_CREATED)
def create_bird(
    bird_data: BirdCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
):
    """Create a new bird, optionally in one of the user's lofts."""
    return service.create_bird(
        current_user.id,
        ring=bird_data.ring,
        name=bird_data.name,
        loft_id=bird_data.loft_id,
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_bird(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
    bird_id: Annotated[int | None, Query(alias="id")] = None,
):
    """Soft delete a bird."""
    if bird_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing bird id")

    service.delete_bird(current_user.id, bird_id)


@router.post("/assign", response_model=BirdResponse)
def assign_bird(
    assign_data: BirdAssign,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
):
    """Move a bird into a loft, or unassign it with a null loft_id."""
    return service.assign_bird(current_user.id, assign_data.bird_id, assign_data.loft_id)


# Older clients post drag-and-drop moves here
router.add_api_route(
    "/move",
    assign_bird,
    methods=["POST"],
    response_model=BirdResponse,
    name="move_bird",
)


@router.get("/{bird_id}", response_model=BirdResponse)
def get_bird(
    bird_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
):
    """Get a specific bird."""
    return service.get_bird(current_user.id, bird_id)


@router.put("/{bird_id}", response_model=BirdResponse)
def update_bird(
    bird_id: int,
    bird_data: BirdUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BirdService, Depends(get_bird_service)],
):
    """Edit a bird's ring, name and loft."""
    return service.update_bird(
        current_user.id,
        bird_id,
        ring=bird_data.ring,
        name=bird_data.name,
        loft_id=bird_data.loft_id,
    )
