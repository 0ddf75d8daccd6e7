"""Human-readable rendering of client values for debugging.

Not imported by the package root; import it explicitly when needed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from oxide_todo.core.types import ServerMetadata, Todo, User

_STATUS_MARKS = {
    "pending": "[ ]",
    "progress": "[~]",
    "completed": "[x]",
    "cancelled": "[-]",
}


def _ts(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def render_user(user: User) -> str:
    return "\n".join([
        f"User {user.username}",
        f"  id:         {user.id}",
        f"  created_at: {_ts(user.created_at)}",
    ])


def render_todo(todo: Todo) -> str:
    mark = _STATUS_MARKS.get(todo.status.value, "[?]")
    return "\n".join([
        f"{mark} {todo.title}",
        f"  id:         {todo.id}",
        f"  status:     {todo.status.value}",
        f"  owner_id:   {todo.owner_id}",
        f"  created_at: {_ts(todo.created_at)}",
        f"  updated_at: {_ts(todo.updated_at)}",
    ])


def render_todos(todos: Iterable[Todo]) -> str:
    lines = [
        f"{_STATUS_MARKS.get(t.status.value, '[?]')} {t.title} ({t.id})"
        for t in todos
    ]
    return "\n".join(lines) if lines else "(no todos)"


def render_metadata(metadata: ServerMetadata) -> str:
    lines = [f"Server version {metadata.version}"]
    for key, value in sorted((metadata.model_extra or {}).items()):
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)
