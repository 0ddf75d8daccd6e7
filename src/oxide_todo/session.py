"""Authenticated session and the token capability it owns."""

from __future__ import annotations

import logging
from uuid import UUID

from oxide_todo.builders.todo import TodoBuilder, TodoHandle
from oxide_todo.builders.todos import TodoListBuilder
from oxide_todo.core.codec import decode
from oxide_todo.core.endpoints import Endpoint
from oxide_todo.core.types import ServerMetadata, TodoStatus, User
from oxide_todo.errors import AuthError, AuthErrorKind
from oxide_todo.transport.base import Transport

logger = logging.getLogger(__name__)


class SessionToken:
    """Bearer token issued by the service.

    Revocation marks the token itself, so every session and builder holding
    this object fails fast afterwards.
    """

    __slots__ = ("_value", "_revoked")

    def __init__(self, value: str) -> None:
        if not value:
            raise ValueError("Session token must be a non-empty string")
        self._value = value
        self._revoked = False

    @property
    def value(self) -> str:
        return self._value

    @property
    def revoked(self) -> bool:
        return self._revoked

    def require(self) -> str:
        """Return the raw token, or raise ``SESSION_REVOKED`` if it was revoked."""
        if self._revoked:
            raise AuthError(AuthErrorKind.SESSION_REVOKED, "Session has been revoked")
        return self._value

    def revoke(self) -> None:
        self._revoked = True

    def __repr__(self) -> str:
        return f"SessionToken(***redacted***, revoked={self._revoked})"


def _as_uuid(todo_id: UUID | str) -> UUID:
    return todo_id if isinstance(todo_id, UUID) else UUID(str(todo_id))


class AuthenticatedSession:
    """Entry point for every todo operation.

    Builder-returning methods are synchronous and perform no I/O. All of them
    raise ``AuthError(SESSION_REVOKED)`` once ``revoke`` has succeeded.
    """

    def __init__(
        self,
        token: SessionToken,
        transport: Transport,
        *,
        user: User | None = None,
    ) -> None:
        self._token = token
        self._transport = transport
        self._user = user

    @property
    def token(self) -> str:
        return self._token.value

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_revoked(self) -> bool:
        return self._token.revoked

    # -- auth ----------------------------------------------------------------

    async def revoke(self) -> None:
        """Invalidate the token server-side. The session is terminal afterwards."""
        token = self._token.require()
        await self._transport.send(
            Endpoint.REVOKE.method,
            Endpoint.REVOKE.path(),
            token=token,
            resource="session",
        )
        self._token.revoke()
        logger.info("Session revoked for %s", self._username())

    # -- todos ---------------------------------------------------------------

    def create_todo(self, title: str) -> TodoBuilder:
        self._token.require()
        return TodoBuilder(
            self._token,
            self._transport,
            title=title,
            status=TodoStatus.PENDING,
        )

    def get_todo(self, todo_id: UUID | str) -> TodoHandle:
        self._token.require()
        return TodoHandle(self._token, self._transport, _as_uuid(todo_id))

    def update_todo(self, todo_id: UUID | str) -> TodoBuilder:
        self._token.require()
        return TodoBuilder(self._token, self._transport, todo_id=_as_uuid(todo_id))

    async def delete_todo(self, todo_id: UUID | str) -> None:
        token = self._token.require()
        todo_id = _as_uuid(todo_id)
        await self._transport.send(
            Endpoint.DELETE_TODO.method,
            Endpoint.DELETE_TODO.path(todo_id),
            token=token,
            resource="todo",
        )
        logger.debug("Deleted todo %s", todo_id)

    def todos(self) -> TodoListBuilder:
        self._token.require()
        return TodoListBuilder(self._token, self._transport)

    # -- misc ----------------------------------------------------------------

    async def server_metadata(self) -> ServerMetadata:
        """Fetch server metadata. Unauthenticated, so it works after revoke."""
        data = await self._transport.send(
            Endpoint.SERVER_METADATA.method,
            Endpoint.SERVER_METADATA.path(),
            resource="server metadata",
        )
        return decode(ServerMetadata, data)

    def _username(self) -> str:
        return self._user.username if self._user is not None else "<token session>"

    def __repr__(self) -> str:
        return f"AuthenticatedSession(user={self._username()!r}, revoked={self.is_revoked})"
