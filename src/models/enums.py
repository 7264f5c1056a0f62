"""Enums for model fields."""

from enum import Enum


class RecordStatus(str, Enum):
    """Lifecycle state of a soft-deletable record."""

    ACTIVE = "active"
    DELETED = "deleted"
