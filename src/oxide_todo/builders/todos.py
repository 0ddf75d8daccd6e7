"""Awaitable query builder for listing todos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generator

from oxide_todo.builders.deferred import DeferredResult, RequestState
from oxide_todo.core.codec import decode
from oxide_todo.core.endpoints import Endpoint
from oxide_todo.core.types import Todo, TodoOrder, TodoOrderBy, TodoPage, TodoStatus

if TYPE_CHECKING:
    from oxide_todo.session import SessionToken
    from oxide_todo.transport.base import Transport

DEFAULT_LIMIT = 10


class TodoListBuilder:
    """Filtered, paginated todo listing.

    Filters chain like ``TodoBuilder`` setters and each returns a new builder.
    Awaiting yields ``list[Todo]``.
    """

    def __init__(
        self,
        token: SessionToken,
        transport: Transport,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        order: TodoOrder = TodoOrder.NEWER,
        order_by: TodoOrderBy = TodoOrderBy.CREATED_AT,
        status: TodoStatus | None = None,
        title: str | None = None,
    ) -> None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        self._token = token
        self._transport = transport
        self._filters: dict[str, Any] = {
            "limit": limit,
            "offset": offset,
            "order": TodoOrder(order),
            "order_by": TodoOrderBy(order_by),
            "status": TodoStatus(status) if status is not None else None,
            "title": title,
        }
        self._result: DeferredResult[list[Todo]] = DeferredResult(self._execute)

    @property
    def state(self) -> RequestState:
        return self._result.state

    def limit(self, limit: int) -> TodoListBuilder:
        return self._replace(limit=limit)

    def offset(self, offset: int) -> TodoListBuilder:
        return self._replace(offset=offset)

    def order(self, order: TodoOrder | str) -> TodoListBuilder:
        return self._replace(order=order)

    def order_by(self, order_by: TodoOrderBy | str) -> TodoListBuilder:
        return self._replace(order_by=order_by)

    def status(self, status: TodoStatus | str) -> TodoListBuilder:
        return self._replace(status=status)

    def title(self, title: str) -> TodoListBuilder:
        return self._replace(title=title)

    def query_params(self) -> dict[str, Any]:
        """Filters as sent on the wire, unset filters omitted."""
        params: dict[str, Any] = {}
        for key, value in self._filters.items():
            if value is None:
                continue
            params[key] = value.value if hasattr(value, "value") else value
        return params

    async def send(self) -> list[Todo]:
        return await self

    def __await__(self) -> Generator[Any, None, list[Todo]]:
        return self._result.__await__()

    def __repr__(self) -> str:
        return f"TodoListBuilder({self.query_params()}, state={self.state})"

    def _replace(self, **changes: Any) -> TodoListBuilder:
        filters = dict(self._filters)
        filters.update(changes)
        return TodoListBuilder(self._token, self._transport, **filters)

    async def _execute(self) -> list[Todo]:
        token = self._token.require()
        data = await self._transport.send(
            Endpoint.LIST_TODOS.method,
            Endpoint.LIST_TODOS.path(),
            token=token,
            params=self.query_params(),
            resource="todo",
        )
        return decode(TodoPage, data).data
