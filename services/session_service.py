"""
Login, logout and bearer session validation.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import UnauthorizedError, ServiceValidationError
from domain.models import AppUser, UserSession, retry_transient
from repositories import UserRepository, SessionRepository

logger = logging.getLogger("scpp.sessions")

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 260_000
SESSION_TOKEN_BYTES = 32


def hash_password(password: str, salt: Optional[str] = None, iterations: int = PBKDF2_ITERATIONS) -> str:
    """Return an encoded PBKDF2 hash: algorithm$iterations$salt$hexdigest"""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    )
    return f"{PBKDF2_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, _ = encoded.split("$", 3)
        iterations = int(iterations)
    except ValueError:
        return False
    if algorithm != PBKDF2_ALGORITHM:
        return False
    candidate = hash_password(password, salt=salt, iterations=iterations)
    return hmac.compare_digest(candidate, encoded)


class SessionService:
    @staticmethod
    @retry_transient
    def create_user(db: Session, email: str, password: str) -> AppUser:
        """
        Create a login account.

        Raises:
            ServiceValidationError: If email or password is empty, or the
                email is already registered
        """
        email = (email or "").strip().lower()
        if not email or not password:
            raise ServiceValidationError("Email and password are required")

        user_repo = UserRepository(db)
        if user_repo.get_by_email(email):
            raise ServiceValidationError(f"User with email {email} already exists")

        try:
            user = user_repo.add(AppUser(email=email, password_hash=hash_password(password)))
            db.commit()
            logger.info(f"Created user {user.user_id} ({email})")
            return user
        except Exception:
            db.rollback()
            logger.exception("Error creating user %s", email)
            raise

    @staticmethod
    @retry_transient
    def login(db: Session, username: str, password: str) -> str:
        """
        Check credentials and open a new session.

        Returns:
            The new session hash, to be sent back as a bearer token

        Raises:
            UnauthorizedError: If the user is unknown or the password is wrong
        """
        user = UserRepository(db).get_by_email(username or "")
        if user is None or not verify_password(password, user.password_hash):
            logger.info(f"Failed login for {username!r}")
            raise UnauthorizedError("Invalid username or password")

        session_hash = secrets.token_hex(SESSION_TOKEN_BYTES)
        try:
            SessionRepository(db).add(
                UserSession(session_hash=session_hash, user_id=user.user_id)
            )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error creating session for user %s", user.user_id)
            raise

        logger.info(f"User {user.user_id} logged in")
        return session_hash

    @staticmethod
    @retry_transient
    def logout(db: Session, session_hash: Optional[str]) -> bool:
        """Delete the session if it exists; True when a row was removed"""
        if not session_hash:
            return False
        try:
            removed = SessionRepository(db).delete_by_hash(session_hash)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting session")
            raise
        return removed > 0

    @staticmethod
    def validate_session(db: Session, session_hash: Optional[str]) -> bool:
        """
        True when session_hash names a stored session.

        A database failure during the lookup counts as an invalid session so
        that an outage never lets a request through.
        """
        if not session_hash:
            return False
        try:
            return SessionRepository(db).get_by_hash(session_hash) is not None
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Session validation failed on database error: {e}")
            return False
