"""Login, logout and session check routes"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_session_hash, require_session
from api.responses import success_response
from domain.models import get_db_session
from domain.schemas.auth_schemas import LoginRequest, LoginResponse
from services.session_service import SessionService

router = APIRouter(tags=["Auth"])
logger = logging.getLogger("scpp.api.auth")


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db_session)):
    """Exchange credentials for a session hash (use it as a bearer token)"""
    session_hash = SessionService.login(db, payload.username, payload.password)
    return LoginResponse(session_hash=session_hash)


@router.post("/logout")
def logout(
    session_hash: Optional[str] = Depends(get_session_hash),
    db: Session = Depends(get_db_session),
):
    """End the current session. Succeeds even when there is nothing to end."""
    SessionService.logout(db, session_hash)
    return success_response(message="Logged out")


@router.get("/check-session")
def check_session(session_hash: str = Depends(require_session)):
    return success_response(message="Session is valid")
