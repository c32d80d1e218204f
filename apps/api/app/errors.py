"""Application exception types."""

from enum import Enum

from app.schemas.error import ErrorResponse


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION_ERROR"
    UNAUTHENTICATED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INTERNAL = "INTERNAL_ERROR"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    # Login failures stay 422 so clients handle them like form errors.
    ErrorKind.INVALID_CREDENTIALS: 422,
    ErrorKind.INTERNAL: 500,
}


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: dict | None = None, *, kind: ErrorKind | None = None) -> None:
        if kind is not None:
            self.kind = kind
        self.message = message
        self.status_code = _STATUS_BY_KIND[self.kind]
        self.payload = ErrorResponse(code=self.kind.value, message=message, details=details)
        super().__init__(message)


class ValidationError(ApiError):
    kind = ErrorKind.VALIDATION


class Unauthenticated(ApiError):
    kind = ErrorKind.UNAUTHENTICATED


class Forbidden(ApiError):
    kind = ErrorKind.FORBIDDEN


class NotFound(ApiError):
    kind = ErrorKind.NOT_FOUND


class InvalidCredentials(ApiError):
    kind = ErrorKind.INVALID_CREDENTIALS


class CryptoUnavailable(ApiError):
    """Secure randomness is unavailable; no credential can be created safely."""

    kind = ErrorKind.INTERNAL


__all__ = [
    "ApiError",
    "CryptoUnavailable",
    "ErrorKind",
    "Forbidden",
    "InvalidCredentials",
    "NotFound",
    "Unauthenticated",
    "ValidationError",
]
