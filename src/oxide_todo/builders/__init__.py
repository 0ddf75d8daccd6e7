"""Request builders for todo operations."""

from oxide_todo.builders.deferred import DeferredResult, RequestState
from oxide_todo.builders.todo import TodoBuilder, TodoHandle
from oxide_todo.builders.todos import TodoListBuilder

__all__ = [
    "DeferredResult",
    "RequestState",
    "TodoBuilder",
    "TodoHandle",
    "TodoListBuilder",
]
