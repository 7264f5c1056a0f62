"""Loft service for create, rename and delete operations."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.models.bird import Bird
from src.models.enums import RecordStatus
from src.models.loft import Loft
from src.services.errors import InvalidInputError
from src.services.ownership import get_owned_loft

logger = logging.getLogger(__name__)


def clean_loft_name(name: str | None) -> str:
    """Trim a loft name, rejecting it if nothing is left."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError("Name is required")
    return cleaned


class LoftService:
    """Service for loft-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_lofts(self, owner_id: int) -> list[Loft]:
        """Get the owner's active lofts, newest first."""
        return (
            self.db.query(Loft)
            .filter(Loft.owner_id == owner_id, Loft.status == RecordStatus.ACTIVE)
            .order_by(Loft.created_at.desc(), Loft.id.desc())
            .all()
        )

    def count_birds(self, loft_ids: list[int]) -> dict[int, int]:
        """Count active birds per loft in one query."""
        if not loft_ids:
            return {}
        counts = (
            self.db.query(Bird.loft_id, func.count(Bird.id))
            .filter(Bird.loft_id.in_(loft_ids), Bird.status == RecordStatus.ACTIVE)
            .group_by(Bird.loft_id)
            .all()
        )
        return dict(counts)

    def get_loft(self, owner_id: int, loft_id: int) -> Loft:
        """Get one of the owner's lofts."""
        return get_owned_loft(self.db, owner_id, loft_id)

    def get_loft_birds(self, loft: Loft) -> list[Bird]:
        """Get the active birds housed in a loft, newest first."""
        return (
            self.db.query(Bird)
            .filter(
                Bird.loft_id == loft.id,
                Bird.owner_id == loft.owner_id,
                Bird.status == RecordStatus.ACTIVE,
            )
            .order_by(Bird.created_at.desc(), Bird.id.desc())
            .all()
        )

    def create_loft(self, owner_id: int, name: str | None) -> Loft:
        """Create a loft for the owner."""
        loft = Loft(owner_id=owner_id, name=clean_loft_name(name))
        self.db.add(loft)
        self.db.commit()
        self.db.refresh(loft)
        logger.info(f"Created loft {loft.id} for user {owner_id}")
        return loft

    def rename_loft(self, owner_id: int, loft_id: int, name: str | None) -> Loft:
        """Rename one of the owner's lofts."""
        loft = get_owned_loft(self.db, owner_id, loft_id)
        loft.name = clean_loft_name(name)
        self.db.commit()
        self.db.refresh(loft)
        return loft

    def delete_loft(self, owner_id: int, loft_id: int) -> int:
        """Soft delete a loft, moving its birds to unassigned.

        Both changes are committed together; if either fails neither is applied.
        Returns the number of birds that were unassigned.
        """
        loft = get_owned_loft(self.db, owner_id, loft_id)

        try:
            unassigned = (
                self.db.query(Bird)
                .filter(
                    Bird.owner_id == owner_id,
                    Bird.loft_id == loft.id,
                    Bird.status == RecordStatus.ACTIVE,
                )
                .update({Bird.loft_id: None}, synchronize_session="fetch")
            )
            loft.soft_delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Deleted loft {loft_id} for user {owner_id}, unassigned {unassigned} birds")
        return unassigned
