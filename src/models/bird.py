"""Bird model."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import SoftDeleteMixin, TimestampMixin

RING_INDEX = "uq_birds_ring"


class Bird(Base, TimestampMixin, SoftDeleteMixin):
    """An individually ringed bird, optionally housed in one of its owner's lofts."""

    __tablename__ = "birds"
    # Ring numbers are unique across all owners; deleted birds keep theirs
    __table_args__ = (Index(RING_INDEX, "ring", unique=True),)

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    ring = Column(String(20), nullable=False)
    name = Column(String(60), nullable=True)
    loft_id = Column(Integer, ForeignKey("lofts.id"), nullable=True, index=True)

    # Relationships
    owner = relationship("User", backref="birds")
    loft = relationship("Loft", back_populates="birds")
