"""Loft API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_current_user, get_loft_service
from src.models.user import User
from src.schemas.loft import (
    BirdInLoft,
    LoftCreate,
    LoftDetailResponse,
    LoftResponse,
    LoftUpdate,
)
from src.services.loft_service import LoftService

router = APIRouter(prefix="/api/v1/lofts", tags=["lofts"])


@router.get("", response_model=list[LoftResponse])
def get_lofts(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[LoftService, Depends(get_loft_service)],
):
    """Get all lofts owned by the current user, newest first."""
    lofts = service.list_lofts(current_user.id)
    bird_counts = service.count_birds([loft.id for loft in lofts])

    result = []
    for loft in lofts:
        loft_response = LoftResponse.model_validate(loft)
        loft_response.bird_count = bird_counts.get(loft.id, 0)
        result.append(loft_response)

    return result


@router.post("", response_model=LoftResponse, status_code=status.HTTP_201_CREATED)
def create_loft(
    loft_data: LoftCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[LoftService, Depends(get_loft_service)],
):
    """Create a new loft."""
    return service.create_loft(current_user.id, loft_data.name)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_loft(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[LoftService, Depends(get_loft_service)],
    loft_id: Annotated[int | None, Query(alias="id")] = None,
):
    """Soft delete a loft. Birds in the loft become unassigned."""
    if loft_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing loft id")

    service.delete_loft(current_user.id, loft_id)


@router.get("/{loft_id}", response_model=LoftDetailResponse)
def get_loft(
    loft_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[LoftService, Depends(get_loft_service)],
):
    """Get a loft along with the birds housed in it."""
    loft = service.get_loft(current_user.id, loft_id)
    birds = service.get_loft_birds(loft)

    return LoftDetailResponse(
        **LoftResponse.model_validate(loft).model_dump(exclude={"bird_count"}),
        bird_count=len(birds),
        birds=[BirdInLoft.model_validate(bird) for bird in birds],
    )


@router.put("/{loft_id}", response_model=LoftResponse)
def rename_loft(
    loft_id: int,
    loft_data: LoftUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[LoftService, Depends(get_loft_service)],
):
    """Rename a loft."""
    loft = service.rename_loft(current_user.id, loft_id, loft_data.name)

    loft_response = LoftResponse.model_validate(loft)
    loft_response.bird_count = service.count_birds([loft.id]).get(loft.id, 0)
    return loft_response
