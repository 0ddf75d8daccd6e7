"""JSON codec between wire dictionaries and pydantic models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from oxide_todo.errors import DecodeError

M = TypeVar("M", bound=BaseModel)


def encode(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", exclude_none=True)


def decode(model_cls: type[M], data: Any) -> M:
    """Validate *data* into *model_cls*, raising ``DecodeError`` on mismatch."""
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise DecodeError(
            f"Expected {model_cls.__name__}: {exc.error_count()} validation error(s)",
            body=data,
        ) from exc
