"""
User and session repositories
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import AppUser, UserSession


class UserRepository(BaseRepository[AppUser]):
    """Repository for login accounts"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email address (case-insensitive)"""
        stmt = select(AppUser).where(AppUser.email == email.strip().lower())
        return self.db.scalars(stmt).first()


class SessionRepository(BaseRepository[UserSession]):
    """Repository for server-side login sessions"""

    def __init__(self, db: Session):
        super().__init__(db, UserSession)

    def get_by_hash(self, session_hash: str) -> Optional[UserSession]:
        stmt = select(UserSession).where(UserSession.session_hash == session_hash)
        return self.db.scalars(stmt).first()

    def delete_by_hash(self, session_hash: str) -> int:
        """Delete the session row(s) for a hash; returns the number removed"""
        result = self.db.execute(
            delete(UserSession).where(UserSession.session_hash == session_hash)
        )
        return result.rowcount or 0
