"""Shared test fixtures and helpers."""

from __future__ import annotations

import asyncio
import uuid
from typing import Any

BASE_URL = "http://todo.test"
TOKEN = "test-token-for-tests"
OWNER_ID = "0b5c3a0e-8f4e-4b7a-9a51-3f0c2f6a9d10"


def user_json(username: str = "jane", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": "7d0e3c9b-2f55-4d3c-8c21-1a4f0f5e6b77",
        "username": username,
        "created_at": "2024-03-01T12:00:00Z",
    }
    data.update(overrides)
    return data


def auth_json(username: str = "jane", token: str = TOKEN) -> dict[str, Any]:
    return {"token": token, "user": user_json(username)}


def todo_json(
    title: str = "buy milk",
    status: str = "pending",
    todo_id: str | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    data = {
        "id": todo_id or str(uuid.uuid4()),
        "title": title,
        "status": status,
        "owner_id": OWNER_ID,
        "created_at": 1709294400,
        "updated_at": 1709294400,
    }
    data.update(overrides)
    return data


class RecordingTransport:
    """In-memory transport that records calls and replays canned results.

    Each queued item is either a JSON value to return or an exception to raise.
    When ``gate`` is set, every send waits on it before answering.
    """

    def __init__(self, *results: Any) -> None:
        self.calls: list[dict[str, Any]] = []
        self._results = list(results)
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        body: Any = None,
        params: dict[str, Any] | None = None,
        resource: str = "resource",
    ) -> Any:
        self.calls.append(
            {"method": method, "path": path, "token": token, "body": body, "params": params}
        )
        if self.gate is not None:
            await self.gate.wait()
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def aclose(self) -> None:
        self.closed = True
