"""Directly awaitable builders for single-todo requests.

``TodoBuilder`` is a pending create or update. Setters return a new builder and
the request is sent only when the builder is awaited::

    todo = await session.create_todo("buy milk").set_status(TodoStatus.COMPLETED)

``TodoHandle`` is the read-only companion returned by ``get_todo``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generator
from uuid import UUID

from oxide_todo.builders.deferred import DeferredResult, RequestState
from oxide_todo.core.codec import decode
from oxide_todo.core.endpoints import Endpoint
from oxide_todo.core.types import Todo, TodoStatus

if TYPE_CHECKING:
    from oxide_todo.session import SessionToken
    from oxide_todo.transport.base import Transport

logger = logging.getLogger(__name__)


class TodoBuilder:
    """A create-or-update request that has not been sent yet.

    Without a todo id, awaiting creates a todo from the title and status.
    With an id, awaiting sends only the fields that were set; if none were
    set it fetches the todo instead. The first await performs the request and
    later awaits replay the same ``Todo`` or exception.
    """

    def __init__(
        self,
        token: SessionToken,
        transport: Transport,
        *,
        todo_id: UUID | None = None,
        title: str | None = None,
        status: TodoStatus | None = None,
    ) -> None:
        self._token = token
        self._transport = transport
        self._todo_id = todo_id
        self._title = title
        self._status = status
        self._result: DeferredResult[Todo] = DeferredResult(self._execute)

    @property
    def todo_id(self) -> UUID | None:
        return self._todo_id

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def status(self) -> TodoStatus | None:
        return self._status

    @property
    def state(self) -> RequestState:
        return self._result.state

    def set_title(self, title: str) -> TodoBuilder:
        return self._replace(title=title)

    def set_status(self, status: TodoStatus | str) -> TodoBuilder:
        return self._replace(status=TodoStatus(status))

    async def send(self) -> Todo:
        return await self

    def __await__(self) -> Generator[Any, None, Todo]:
        return self._result.__await__()

    def __repr__(self) -> str:
        return (
            f"TodoBuilder(todo_id={self._todo_id}, title={self._title!r}, "
            f"status={self._status}, state={self.state})"
        )

    # -- internal ------------------------------------------------------------

    def _replace(self, **changes: Any) -> TodoBuilder:
        fields: dict[str, Any] = {
            "todo_id": self._todo_id,
            "title": self._title,
            "status": self._status,
        }
        fields.update(changes)
        return TodoBuilder(self._token, self._transport, **fields)

    def _payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self._title is not None:
            payload["title"] = self._title
        if self._status is not None:
            payload["status"] = self._status.value
        return payload

    async def _execute(self) -> Todo:
        token = self._token.require()
        payload = self._payload()

        if self._todo_id is None:
            endpoint = Endpoint.CREATE_TODO
            payload.setdefault("status", TodoStatus.PENDING.value)
        elif payload:
            endpoint = Endpoint.UPDATE_TODO
        else:
            endpoint = Endpoint.GET_TODO

        data = await self._transport.send(
            endpoint.method,
            endpoint.path(self._todo_id),
            token=token,
            body=payload if endpoint is not Endpoint.GET_TODO else None,
            resource="todo",
        )
        todo = decode(Todo, data)
        logger.debug("%s resolved todo %s", endpoint.name, todo.id)
        return todo


class TodoHandle:
    """Lazy fetch of one todo. Awaiting it issues a single GET."""

    def __init__(self, token: SessionToken, transport: Transport, todo_id: UUID) -> None:
        self._token = token
        self._transport = transport
        self._todo_id = todo_id
        self._result: DeferredResult[Todo] = DeferredResult(self._execute)

    @property
    def todo_id(self) -> UUID:
        return self._todo_id

    @property
    def state(self) -> RequestState:
        return self._result.state

    async def send(self) -> Todo:
        return await self

    def __await__(self) -> Generator[Any, None, Todo]:
        return self._result.__await__()

    def __repr__(self) -> str:
        return f"TodoHandle(todo_id={self._todo_id}, state={self.state})"

    async def _execute(self) -> Todo:
        token = self._token.require()
        data = await self._transport.send(
            Endpoint.GET_TODO.method,
            Endpoint.GET_TODO.path(self._todo_id),
            token=token,
            resource="todo",
        )
        return decode(Todo, data)
