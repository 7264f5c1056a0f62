"""Ring number normalization and validation.

A ring is two letters (country), two digits (year), an optional letter, then a
four digit serial: ``GB24A1234`` or ``GB241234``. Users type rings with mixed
case and spacing ("gb 24 a 1234"), so everything is normalized before it is
validated or stored.
"""

import re

RING_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z]?[0-9]{4}")

_WHITESPACE = re.compile(r"\s+")


def normalize_ring(value: str | None) -> str:
    """Uppercase a ring and strip all whitespace."""
    if not value:
        return ""
    return _WHITESPACE.sub("", value.upper())


def is_valid_ring(normalized: str) -> bool:
    """Check that an already-normalized ring matches the ring format exactly."""
    if not normalized:
        return False
    return RING_PATTERN.fullmatch(normalized) is not None
