"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.bird_service import BirdService
from src.services.loft_service import LoftService

# Missing credentials are reported by get_current_user so every failure is a 401
security = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise _unauthorized()

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized()

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise _unauthorized()

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise _unauthorized()

    return user


def get_loft_service(
    db: Annotated[Session, Depends(get_db)],
) -> LoftService:
    """Get loft service with dependencies."""
    return LoftService(db)


def get_bird_service(
    db: Annotated[Session, Depends(get_db)],
) -> BirdService:
    """Get bird service with dependencies."""
    return BirdService(db)
