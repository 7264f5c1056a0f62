"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Enum, func

from src.models.enums import RecordStatus


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Mixin to add soft delete functionality.

    The record's state lives in ``status``; ``deleted_at`` only records when the
    transition to ``DELETED`` happened. Queries filter on ``status``.
    """

    status = Column(
        Enum(
            RecordStatus,
            name="recordstatus",
            values_callable=lambda x: [e.value for e in x],
            native_enum=False,
            length=20,
        ),
        default=RecordStatus.ACTIVE,
        server_default=RecordStatus.ACTIVE.value,
        nullable=False,
        index=True,
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        """Check if the record is soft-deleted."""
        return self.status == RecordStatus.DELETED

    def soft_delete(self) -> None:
        """Soft delete the record."""
        self.status = RecordStatus.DELETED
        self.deleted_at = datetime.now(UTC)
