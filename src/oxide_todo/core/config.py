"""Client configuration loaded from the environment."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class ClientConfig(BaseSettings):
    """Connection settings for the todo service."""

    model_config = {"env_prefix": "OXIDE_TODO_"}

    base_url: str = "http://localhost:8080"
    timeout_seconds: float = 30.0
    user_agent: str = "oxide-todo-python/0.1"
    verify_ssl: bool = True
