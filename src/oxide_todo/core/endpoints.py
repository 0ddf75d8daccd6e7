"""Routes exposed by the todo service."""

from __future__ import annotations

from enum import Enum
from uuid import UUID


class Endpoint(Enum):
    """Each member is ``(method, path template)``."""

    REGISTER = ("POST", "/api/auth/register")
    LOGIN = ("POST", "/api/auth/login")
    REVOKE = ("POST", "/api/auth/revoke")
    CREATE_TODO = ("POST", "/api/todo")
    LIST_TODOS = ("GET", "/api/todo")
    GET_TODO = ("GET", "/api/todo/{todo_id}")
    UPDATE_TODO = ("PUT", "/api/todo/{todo_id}")
    DELETE_TODO = ("DELETE", "/api/todo/{todo_id}")
    SERVER_METADATA = ("GET", "/api/server/metadata")

    @property
    def method(self) -> str:
        return self.value[0]

    def path(self, todo_id: UUID | None = None) -> str:
        template = self.value[1]
        if "{todo_id}" in template:
            if todo_id is None:
                raise ValueError(f"{self.name} needs a todo id")
            return template.format(todo_id=todo_id)
        return template
