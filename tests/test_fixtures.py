"""
Shared test fixtures and utilities for the SCPP test suite.

Database-backed tests run against a fresh in-memory SQLite database per test
(StaticPool keeps the single connection alive across sessions). Route tests
use the module-level TestClient; the app lifespan is not entered, so nothing
touches the configured database.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from domain.enums import DocumentKind
from domain.models import (
    Base,
    Category,
    Document,
    DocumentType,
    FoodItem,
    get_db_session,
)
from main import app
from services.session_service import SessionService

client = TestClient(app)

TEST_PASSWORD = "correct horse battery staple"

# Lets make_document tell "no category given" apart from category=None
_DEFAULT = object()


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


# =============================================================================
# MOCK OBJECTS FOR MONKEYPATCHED ROUTE TESTS
# =============================================================================


def make_category(category_id=1, description="Groceries", sort_order=1):
    return SimpleNamespace(
        category_id=category_id, description=description, sort_order=sort_order
    )


def make_document(
    document_id=1,
    document_type_id=DocumentKind.EXPENSE.value,
    purpose="Weekly shop",
    amount=Decimal("84.20"),
    day=None,
    category=_DEFAULT,
):
    """
    Create a mock document shaped like the ORM row the mappers read.

    Example:
        >>> doc = make_document(amount=Decimal("12.50"))
        >>> doc.document_type.description
        'expense'
    """
    if category is _DEFAULT:
        category = make_category()
    kind = DocumentKind(document_type_id)
    return SimpleNamespace(
        document_id=document_id,
        document_type_id=document_type_id,
        purpose=purpose,
        amount=amount,
        date=day or date(2024, 3, 15),
        category_id=category.category_id if category else None,
        category=category,
        document_type=SimpleNamespace(
            document_type_id=kind.value, description=kind.label
        ),
    )


# =============================================================================
# DATABASE HELPERS
# =============================================================================


def add_category(db: Session, description: str, sort_order: int = 0) -> Category:
    category = Category(description=description, sort_order=sort_order)
    db.add(category)
    db.commit()
    return category


def add_document(
    db: Session,
    kind: DocumentKind,
    amount,
    day: date,
    category: Category = None,
    purpose: str = "",
) -> Document:
    document = Document(
        document_type_id=kind.value,
        amount=Decimal(str(amount)),
        date=day,
        category_id=category.category_id if category else None,
        purpose=purpose,
    )
    db.add(document)
    db.commit()
    return document


def add_food_item(db: Session, name: str = "Milk", unit: str = "l") -> FoodItem:
    item = FoodItem(name=name, unit=unit)
    db.add(item)
    db.commit()
    return item


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Fresh in-memory SQLite schema with foreign keys enforced and document types seeded"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    with Session(engine) as seed:
        seed.add_all(
            DocumentType(document_type_id=kind.value, description=kind.label)
            for kind in DocumentKind
        )
        seed.commit()

    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy session bound to the per-test SQLite engine
    """
    SessionLocal = sessionmaker(bind=db_engine, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def api_db(db_session) -> Generator[Session, None, None]:
    """Route every request's get_db_session dependency to db_session"""

    def _override():
        yield db_session

    app.dependency_overrides[get_db_session] = _override
    try:
        yield db_session
    finally:
        app.dependency_overrides.pop(get_db_session, None)


@pytest.fixture(scope="function")
def auth_headers(api_db) -> dict:
    """Create a user, log in, and return the bearer header"""
    email = unique_email("owner")
    SessionService.create_user(api_db, email, TEST_PASSWORD)
    session_hash = SessionService.login(api_db, email, TEST_PASSWORD)
    return {"Authorization": f"Bearer {session_hash}"}
