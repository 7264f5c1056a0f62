"""HTTP errors raised by the loft and bird services."""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Record is missing, soft-deleted, or owned by someone else."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InvalidInputError(HTTPException):
    """A required field is empty or malformed."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidLoftError(HTTPException):
    """Target loft for an assignment is missing, deleted, or not the caller's."""

    def __init__(self, detail: str = "Invalid loft"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class RingConflictError(HTTPException):
    """Another active bird already carries the ring."""

    def __init__(
        self, detail: str = "That ring number already exists. Please use a unique ring."
    ):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
