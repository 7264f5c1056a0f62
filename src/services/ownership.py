"""Ownership checks shared by every loft and bird handler."""

from typing import TypeVar

from sqlalchemy.orm import Session

from src.models.bird import Bird
from src.models.enums import RecordStatus
from src.models.loft import Loft
from src.services.errors import InvalidLoftError, NotFoundError

T = TypeVar("T", Loft, Bird)

# Ids are 32-bit INTEGER columns
MAX_RECORD_ID = 2**31 - 1


def get_owned(db: Session, model: type[T], owner_id: int, record_id: int) -> T:
    """Get an active record owned by ``owner_id``.

    Missing, deleted and foreign records all raise the same 404 so callers
    cannot probe for other owners' ids.
    """
    if not 1 <= record_id <= MAX_RECORD_ID:
        raise NotFoundError(f"{model.__name__} not found")

    record = (
        db.query(model)
        .filter(
            model.id == record_id,
            model.owner_id == owner_id,
            model.status == RecordStatus.ACTIVE,
        )
        .first()
    )
    if record is None:
        raise NotFoundError(f"{model.__name__} not found")
    return record


def get_owned_loft(db: Session, owner_id: int, loft_id: int) -> Loft:
    """Get a loft the caller owns."""
    return get_owned(db, Loft, owner_id, loft_id)


def get_owned_bird(db: Session, owner_id: int, bird_id: int) -> Bird:
    """Get a bird the caller owns."""
    return get_owned(db, Bird, owner_id, bird_id)


def resolve_loft_for_assignment(db: Session, owner_id: int, loft_id: int) -> Loft:
    """Check that a bird of ``owner_id`` may be placed in ``loft_id``."""
    try:
        return get_owned_loft(db, owner_id, loft_id)
    except NotFoundError as e:
        raise InvalidLoftError() from e
