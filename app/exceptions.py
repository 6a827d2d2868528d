from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "SERVICE_ERROR"

    def __init__(self, message: str = "Service error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met (400)."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnauthorizedError(ServiceError):
    """Raised when the bearer session is missing/unknown or login fails (401)."""

    http_status = 401
    default_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Invalid session", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found (404)."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnprocessableError(ServiceError):
    """Raised when a well-formed request breaks a business rule (422).

    Examples: consuming more stock than the ledger holds, pointing a document
    at a category that does not exist.
    """

    http_status = 422
    default_code = "UNPROCESSABLE"

    def __init__(self, message: str = "Unprocessable request", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class DatabaseError(ServiceError):
    """Raised when the database keeps failing after retries (500)."""

    http_status = 500
    default_code = "DATABASE_ERROR"

    def __init__(self, message: str = "Database operation failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)
