"""
Dependency injection for FastAPI endpoints.
"""
from typing import Optional, cast

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.exceptions import AccessDeniedError
from certprep.core.security import decode_token
from certprep.db.base import get_db
from certprep.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_PREFIX}/auth/login")


def get_current_user(
    db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)
) -> User:
    """
    Get current authenticated user from JWT token.

    Args:
        db: Database session
        token: JWT token

    Returns:
        Current user

    Raises:
        HTTPException: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(token)
    if payload is None:
        raise credentials_exception
    user_id: Optional[str] = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise credentials_exception

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise credentials_exception

    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Get current active user.

    Raises:
        HTTPException: If user is inactive
    """
    if not cast(bool, current_user.is_active):
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Reject callers without the admin role."""
    if not current_user.is_admin:
        raise AccessDeniedError("Admin privileges required")
    return current_user


def get_certification_code(
    certification: Optional[str] = Query(default=None, description="Certification code, e.g. CAPM"),
) -> str:
    """Certification from the query string, falling back to the configured default."""
    return (certification or settings.DEFAULT_CERTIFICATION).upper()
