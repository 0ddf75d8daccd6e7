"""HTTP transport layer."""

from oxide_todo.transport.base import Transport
from oxide_todo.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "Transport"]
