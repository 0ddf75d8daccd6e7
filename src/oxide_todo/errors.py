"""Closed error taxonomy raised by the todo client.

Every failure reaches the caller as one of the exceptions below, raised at the
point where the result is requested. Each carries structured attributes so
callers can branch without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from oxide_todo.core.types import ServiceErrorPayload


class TodoClientError(Exception):
    """Base class for every error raised by the client."""


class TransportError(TodoClientError):
    """Connection, timeout or DNS failure. Never retried by the client."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnexpectedResponse(TodoClientError):
    """Non-2xx response whose body could not be mapped to a known failure."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Unexpected response {status}: {body[:200]}")
        self.status = status
        self.body = body


class AuthErrorKind(StrEnum):
    INVALID_CREDENTIALS = "invalid_credentials"
    USERNAME_TAKEN = "username_taken"
    WEAK_PASSWORD = "weak_password"
    INVALID_INPUT = "invalid_input"
    ACCOUNT_LOCKED = "account_locked"
    SESSION_REVOKED = "session_revoked"
    UNAUTHORIZED = "unauthorized"


class AuthError(TodoClientError):
    def __init__(self, kind: AuthErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.value.replace("_", " "))
        self.kind = kind
        self.message = message


class ValidationError(TodoClientError):
    """Input rejected by the service."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}" if field else reason)
        self.field = field
        self.reason = reason


class NotFound(TodoClientError):
    """Target is absent or not owned by the caller. The two are indistinguishable."""

    def __init__(self, resource: str, message: str | None = None) -> None:
        super().__init__(message or f"{resource} not found")
        self.resource = resource


class DecodeError(TodoClientError):
    """Response body did not match the expected shape."""

    def __init__(self, detail: str, *, body: Any = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.body = body


_AUTH_CODES = {kind.value: kind for kind in AuthErrorKind}

_UNAUTHORIZED_STATUSES = (401, 403)


def error_from_payload(
    status: int,
    payload: ServiceErrorPayload,
    *,
    resource: str = "resource",
    raw_body: str = "",
) -> TodoClientError:
    """Map a structured service error onto the taxonomy.

    An explicit ``code`` wins over the HTTP status.
    """
    code = (payload.code or "").lower()
    if code in _AUTH_CODES:
        return AuthError(_AUTH_CODES[code], payload.message)
    if code == "not_found":
        return NotFound(resource, payload.message)
    if code == "validation_error":
        return ValidationError(payload.field or "", payload.message)

    if status == 404:
        return NotFound(resource, payload.message)
    if status in _UNAUTHORIZED_STATUSES:
        return AuthError(AuthErrorKind.UNAUTHORIZED, payload.message)
    if status in (400, 422):
        return ValidationError(payload.field or "", payload.message)
    return UnexpectedResponse(status, raw_body or payload.message)
