"""Async Python client for the Oxide Todo service."""

from oxide_todo.builders import RequestState, TodoBuilder, TodoHandle, TodoListBuilder
from oxide_todo.client import UnauthenticatedClient
from oxide_todo.core.config import ClientConfig
from oxide_todo.core.types import (
    ServerMetadata,
    Todo,
    TodoOrder,
    TodoOrderBy,
    TodoStatus,
    User,
)
from oxide_todo.errors import (
    AuthError,
    AuthErrorKind,
    DecodeError,
    NotFound,
    TodoClientError,
    TransportError,
    UnexpectedResponse,
    ValidationError,
)
from oxide_todo.session import AuthenticatedSession, SessionToken

__all__ = [
    "AuthError",
    "AuthErrorKind",
    "AuthenticatedSession",
    "ClientConfig",
    "DecodeError",
    "NotFound",
    "RequestState",
    "ServerMetadata",
    "SessionToken",
    "Todo",
    "TodoBuilder",
    "TodoClientError",
    "TodoHandle",
    "TodoListBuilder",
    "TodoOrder",
    "TodoOrderBy",
    "TodoStatus",
    "TransportError",
    "UnauthenticatedClient",
    "UnexpectedResponse",
    "User",
    "ValidationError",
]
