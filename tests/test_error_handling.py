"""
Error handling tests:
- transient database error detection and the retry wrapper
- the JSON error envelope produced by the exception handlers
- request logging middleware headers
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

from test_fixtures import client, make_category
import domain.models.database as database
from api.dependencies import require_session
from app.config import settings
from app.exceptions import (
    DatabaseError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
    UnprocessableError,
)
from domain.models.database import is_transient_error, retry_delay_seconds, retry_transient
from main import app
from services.category_service import CategoryService


class _PgError(Exception):
    def __init__(self, message, pgcode):
        super().__init__(message)
        self.pgcode = pgcode


def _operational(message="server closed the connection unexpectedly", pgcode=None):
    orig = _PgError(message, pgcode) if pgcode else Exception(message)
    return OperationalError("SELECT 1", {}, orig)


# =============================================================================
# TRANSIENT ERROR DETECTION
# =============================================================================


@pytest.mark.parametrize("pgcode", ["40001", "40P01", "55P03", "57P01", "08006", "08001"])
def test_transient_pgcodes(pgcode):
    assert is_transient_error(_operational("boom", pgcode=pgcode))


def test_non_transient_pgcode():
    err = IntegrityError("INSERT", {}, _PgError("duplicate key", "23505"))
    assert not is_transient_error(err)


def test_transient_by_message():
    assert is_transient_error(_operational("could not connect to server: Connection refused"))
    assert is_transient_error(_operational("database is locked"))
    assert not is_transient_error(_operational("no such table: foo"))


def test_invalidated_connection_is_transient():
    err = OperationalError("SELECT 1", {}, Exception("whatever"), connection_invalidated=True)
    assert is_transient_error(err)


def test_plain_exceptions_are_not_transient():
    assert not is_transient_error(ValueError("nope"))


def test_retry_delay_backs_off_and_caps(monkeypatch):
    monkeypatch.setattr(settings, "db_retry_delay_ms", 1500)
    monkeypatch.setattr(settings, "db_retry_max_delay_ms", 10_000)
    assert retry_delay_seconds(1) == 1.5
    assert retry_delay_seconds(2) == 3.0
    assert retry_delay_seconds(3) == 6.0
    assert retry_delay_seconds(4) == 10.0
    assert retry_delay_seconds(10) == 10.0


# =============================================================================
# RETRY WRAPPER
# =============================================================================


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(database.time, "sleep", recorded.append)
    monkeypatch.setattr(settings, "db_max_retries", 3)
    monkeypatch.setattr(settings, "db_retry_delay_ms", 100)
    monkeypatch.setattr(settings, "db_retry_max_delay_ms", 1000)
    return recorded


def test_retry_recovers_after_transient_errors(sleeps):
    db = Mock()
    calls = {"n": 0}

    @retry_transient
    def flaky(db=None):
        calls["n"] += 1
        if calls["n"] < 3:
            raise _operational()
        return "ok"

    assert flaky(db=db) == "ok"
    assert calls["n"] == 3
    assert sleeps == [0.1, 0.2]
    assert db.rollback.call_count == 2


def test_retry_gives_up_after_max_attempts(sleeps):
    @retry_transient
    def always_down(db=None):
        raise _operational()

    with pytest.raises(DatabaseError) as exc_info:
        always_down(db=Mock())
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert len(sleeps) == 2


def test_retry_does_not_retry_permanent_errors(sleeps):
    calls = {"n": 0}

    @retry_transient
    def broken(db=None):
        calls["n"] += 1
        raise IntegrityError("INSERT", {}, _PgError("duplicate key", "23505"))

    with pytest.raises(IntegrityError):
        broken(db=Mock())
    assert calls["n"] == 1
    assert sleeps == []


def test_retry_passes_service_errors_through(sleeps):
    @retry_transient
    def missing(db=None):
        raise NotFoundError("gone")

    with pytest.raises(NotFoundError):
        missing(db=Mock())
    assert sleeps == []


def test_retry_logs_each_attempt(sleeps, caplog):
    calls = {"n": 0}

    @retry_transient
    def flaky_once(db=None):
        calls["n"] += 1
        if calls["n"] == 1:
            raise _operational()
        return calls["n"]

    with caplog.at_level("WARNING", logger="scpp.database"):
        assert flaky_once(db=Mock()) == 2
    assert "attempt 1/3" in caplog.text


# =============================================================================
# EXCEPTION CLASSES
# =============================================================================


@pytest.mark.parametrize(
    "exc_class,status,code",
    [
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (NotFoundError, 404, "NOT_FOUND"),
        (UnprocessableError, 422, "UNPROCESSABLE"),
        (DatabaseError, 500, "DATABASE_ERROR"),
    ],
)
def test_exception_status_and_code(exc_class, status, code):
    exc = exc_class("msg")
    assert exc.http_status == status
    assert exc.to_dict() == {"code": code, "message": "msg"}


def test_exception_to_dict_includes_details_and_custom_code():
    exc = UnprocessableError("no stock", details={"available": 1}, code="INSUFFICIENT_STOCK")
    assert exc.to_dict() == {
        "code": "INSUFFICIENT_STOCK",
        "message": "no stock",
        "details": {"available": 1},
    }


# =============================================================================
# HTTP ERROR ENVELOPE
# =============================================================================


@pytest.fixture
def authorized():
    app.dependency_overrides[require_session] = lambda: "test-session"
    try:
        yield
    finally:
        app.dependency_overrides.pop(require_session, None)


@pytest.mark.parametrize(
    "exc,status",
    [
        (ServiceValidationError("bad"), 400),
        (NotFoundError("missing"), 404),
        (UnprocessableError("conflict"), 422),
        (DatabaseError("down"), 500),
    ],
)
def test_service_errors_map_to_status(authorized, monkeypatch, exc, status):
    def raiser(db):
        raise exc

    monkeypatch.setattr(CategoryService, "list_categories", raiser)
    r = client.get("/categories")
    assert r.status_code == status
    body = r.json()
    assert body["success"] is False
    assert body["error"]["message"] == exc.message
    assert "timestamp" in body


def test_unexpected_error_returns_generic_500(authorized, monkeypatch):
    def raiser(db):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(CategoryService, "list_categories", raiser)
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get("/categories")
    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "secret" not in r.text


def test_unknown_route_uses_envelope():
    r = client.get("/definitely-not-a-route")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_request_id_and_timing_headers(authorized, monkeypatch):
    monkeypatch.setattr(CategoryService, "list_categories", lambda db: [make_category()])
    r = client.get("/categories")
    assert r.status_code == 200
    assert len(r.headers["X-Request-ID"]) == 36
    assert float(r.headers["X-Process-Time"]) >= 0


def test_debug_responses_keeps_body_intact(authorized, monkeypatch):
    monkeypatch.setattr(settings, "debug_responses", True)
    monkeypatch.setattr(CategoryService, "list_categories", lambda db: [make_category()])
    r = client.get("/categories")
    assert r.status_code == 200
    assert r.json() == [{"category_id": 1, "description": "Groceries", "sort_order": 1}]
