"""
Database configuration, session management and transient-error retry.
"""

import functools
import logging
import time

from sqlalchemy import create_engine, select, text
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings
from app.exceptions import DatabaseError

logger = logging.getLogger("scpp.database")

# Create SQLAlchemy Base
Base = declarative_base()

# SQLSTATE codes worth retrying: connection exceptions (class 08), serialization
# failure, deadlock, lock timeout and admin shutdown.
TRANSIENT_PGCODES = {"40001", "40P01", "55P03", "57P01", "57P02", "57P03"}

_TRANSIENT_MESSAGE_MARKERS = (
    "server closed the connection",
    "connection refused",
    "could not connect",
    "connection reset",
    "connection timed out",
    "broken pipe",
    "database is locked",
)


def _engine_kwargs(url: str) -> dict:
    kwargs = {"echo": settings.db_echo, "future": True, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["pool_recycle"] = 3600
    return kwargs


# Create engine
engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema and seed the fixed document types"""
    from domain.models.finance import DocumentType
    from domain.enums import DocumentKind

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    with SessionLocal() as db:
        existing = set(db.scalars(select(DocumentType.document_type_id)))
        missing = [kind for kind in DocumentKind if kind.value not in existing]
        for kind in missing:
            db.add(DocumentType(document_type_id=kind.value, description=kind.label))
        if missing:
            db.commit()
            logger.info("Seeded document types: %s", [k.label for k in missing])


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_database() -> bool:
    """Run SELECT 1 against the pool; used by the health endpoint."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


def is_transient_error(exc: BaseException) -> bool:
    """True when a DB error is a lost connection, deadlock or lock timeout."""
    if not isinstance(exc, DBAPIError):
        return False
    if exc.connection_invalidated:
        return True

    pgcode = getattr(exc.orig, "pgcode", None)
    if pgcode:
        return pgcode in TRANSIENT_PGCODES or pgcode.startswith("08")

    if isinstance(exc, OperationalError):
        message = str(exc.orig).lower()
        return any(marker in message for marker in _TRANSIENT_MESSAGE_MARKERS)
    return False


def retry_delay_seconds(attempt: int) -> float:
    """Exponential backoff from db_retry_delay_ms, capped at db_retry_max_delay_ms."""
    delay_ms = settings.db_retry_delay_ms * (2 ** (attempt - 1))
    return min(delay_ms, settings.db_retry_max_delay_ms) / 1000.0


def retry_transient(func):
    """
    Re-run a service operation when it fails on a transient database error.

    The wrapped callable must receive its Session either positionally or as
    ``db=``; the session is rolled back before every retry so the operation
    starts from a clean transaction. When the attempts run out the last error
    is raised as DatabaseError.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        db = kwargs.get("db")
        if db is None:
            db = next((a for a in args if isinstance(a, Session)), None)

        attempts = settings.db_max_retries
        for attempt in range(1, attempts + 1):
            try:
                return func(*args, **kwargs)
            except DBAPIError as exc:
                if db is not None:
                    db.rollback()
                if not is_transient_error(exc):
                    raise
                if attempt >= attempts:
                    logger.error(
                        "Database still unavailable after %d attempts in %s: %s",
                        attempts,
                        func.__qualname__,
                        exc.orig,
                    )
                    raise DatabaseError("Database temporarily unavailable") from exc
                delay = retry_delay_seconds(attempt)
                logger.warning(
                    "Database connection error in %s (attempt %d/%d). Retrying in %.2fs: %s",
                    func.__qualname__,
                    attempt,
                    attempts,
                    delay,
                    exc.orig,
                )
                time.sleep(delay)

    return wrapper
