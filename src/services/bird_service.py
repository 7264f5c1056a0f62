"""Bird service for create, edit, assign and delete operations."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from src.models.bird import RING_INDEX, Bird
from src.models.enums import RecordStatus
from src.schemas.bird import UNASSIGNED
from src.services.errors import InvalidInputError, RingConflictError
from src.services.ownership import (
    get_owned_bird,
    get_owned_loft,
    resolve_loft_for_assignment,
)
from src.services.rings import is_valid_ring, normalize_ring

logger = logging.getLogger(__name__)


def validated_ring(ring: str | None) -> str:
    """Normalize a ring, raising a 400 if it is missing or malformed."""
    normalized = normalize_ring(ring)
    if not normalized:
        raise InvalidInputError("Missing ring")
    if not is_valid_ring(normalized):
        raise InvalidInputError("Invalid ring format")
    return normalized


def clean_bird_name(name: str | None) -> str | None:
    """Trim a bird name; blank names are stored as null."""
    if name is None:
        return None
    return name.strip() or None


def _is_ring_collision(error: IntegrityError) -> bool:
    """Check whether an IntegrityError came from the ring unique index."""
    diag = getattr(error.orig, "diag", None)
    if diag is not None:
        return diag.constraint_name == RING_INDEX
    # SQLite reports no constraint name, only "UNIQUE constraint failed: birds.ring"
    return "birds.ring" in str(error.orig)


class BirdService:
    """Service for bird-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def _active_birds(self, owner_id: int):
        return (
            self.db.query(Bird)
            .options(joinedload(Bird.loft))
            .filter(Bird.owner_id == owner_id, Bird.status == RecordStatus.ACTIVE)
        )

    def _commit_ring(self, ring: str) -> None:
        """Commit pending bird changes, translating a ring collision into a 409."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not _is_ring_collision(e):
                raise
            logger.warning(f"Ring {ring} already in use")
            raise RingConflictError() from e

    def _target_loft_id(self, owner_id: int, loft_id: int | str | None) -> int | None:
        if loft_id is None or loft_id == UNASSIGNED:
            return None
        return resolve_loft_for_assignment(self.db, owner_id, loft_id).id

    def list_birds(
        self,
        owner_id: int,
        loft_id: int | None = None,
        unassigned: bool = False,
        limit: int | None = None,
    ) -> list[Bird]:
        """Get the owner's active birds with their lofts, newest first."""
        query = self._active_birds(owner_id)
        if loft_id is not None:
            get_owned_loft(self.db, owner_id, loft_id)
            query = query.filter(Bird.loft_id == loft_id)
        elif unassigned:
            query = query.filter(Bird.loft_id.is_(None))

        query = query.order_by(Bird.created_at.desc(), Bird.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_birds(self, owner_id: int, unassigned: bool = False) -> int:
        """Count the owner's active birds."""
        query = self.db.query(Bird).filter(
            Bird.owner_id == owner_id, Bird.status == RecordStatus.ACTIVE
        )
        if unassigned:
            query = query.filter(Bird.loft_id.is_(None))
        return query.count()

    def get_bird(self, owner_id: int, bird_id: int) -> Bird:
        """Get one of the owner's birds."""
        return get_owned_bird(self.db, owner_id, bird_id)

    def create_bird(
        self,
        owner_id: int,
        ring: str | None,
        name: str | None = None,
        loft_id: int | None = None,
    ) -> Bird:
        """Create a bird, optionally placing it in one of the owner's lofts."""
        normalized = validated_ring(ring)
        bird = Bird(
            owner_id=owner_id,
            ring=normalized,
            name=clean_bird_name(name),
            loft_id=self._target_loft_id(owner_id, loft_id),
        )
        self.db.add(bird)
        self._commit_ring(normalized)
        self.db.refresh(bird)
        logger.info(f"Created bird {bird.id} ({bird.ring}) for user {owner_id}")
        return bird

    def update_bird(
        self,
        owner_id: int,
        bird_id: int,
        ring: str | None,
        name: str | None = None,
        loft_id: int | str | None = None,
    ) -> Bird:
        """Replace a bird's ring, name and loft in one commit."""
        bird = get_owned_bird(self.db, owner_id, bird_id)
        normalized = validated_ring(ring)
        new_loft_id = self._target_loft_id(owner_id, loft_id)

        bird.ring = normalized
        bird.name = clean_bird_name(name)
        bird.loft_id = new_loft_id
        self._commit_ring(normalized)
        self.db.refresh(bird)
        return bird

    def assign_bird(self, owner_id: int, bird_id: int | None, loft_id: int | None) -> Bird:
        """Move a bird into a loft, or out of its loft when ``loft_id`` is None."""
        if bird_id is None:
            raise InvalidInputError("Missing bird id")
        bird = get_owned_bird(self.db, owner_id, bird_id)
        bird.loft_id = self._target_loft_id(owner_id, loft_id)
        self.db.commit()
        self.db.refresh(bird)
        return bird

    def delete_bird(self, owner_id: int, bird_id: int) -> None:
        """Soft delete a bird and take it out of its loft."""
        bird = get_owned_bird(self.db, owner_id, bird_id)
        bird.loft_id = None
        bird.soft_delete()
        self.db.commit()
        logger.info(f"Deleted bird {bird_id} for user {owner_id}")
