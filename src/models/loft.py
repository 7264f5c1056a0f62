"""Loft model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import SoftDeleteMixin, TimestampMixin


class Loft(Base, TimestampMixin, SoftDeleteMixin):
    """A location or group that an owner's birds can be assigned to."""

    __tablename__ = "lofts"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    owner = relationship("User", backref="lofts")
    # No delete cascade: removing a loft unassigns its birds
    birds = relationship("Bird", back_populates="loft")
