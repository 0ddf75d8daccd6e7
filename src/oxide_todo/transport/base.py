"""Transport Protocol consumed by the client and its builders."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP round trip per ``send`` and decodes the JSON body.

    Implementations raise the exceptions in ``oxide_todo.errors``. A response
    with an empty body yields ``None``.
    """

    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        body: Any = None,
        params: dict[str, Any] | None = None,
        resource: str = "resource",
    ) -> Any: ...

    async def aclose(self) -> None: ...
