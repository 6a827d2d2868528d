"""
API dependencies for dependency injection
"""

from datetime import date
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from services.session_service import SessionService

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_hash(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Bearer token from the Authorization header, if any"""
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


def require_session(
    session_hash: Optional[str] = Depends(get_session_hash),
    db: Session = Depends(get_db_session),
) -> str:
    """
    Guard for data routes: the bearer token must name a stored session.

    Raises:
        UnauthorizedError: If the header is missing or the session is unknown
    """
    if session_hash is None:
        raise UnauthorizedError("Missing bearer token")
    if not SessionService.validate_session(db, session_hash):
        raise UnauthorizedError("Invalid session")
    return session_hash


def get_today() -> date:
    """Reference date for dashboard month boundaries; overridden in tests"""
    return date.today()
