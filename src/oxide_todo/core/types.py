"""Wire types mirroring the todo service's JSON contracts."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TodoStatus(StrEnum):
    """Lifecycle status of a todo."""

    PENDING = "pending"
    PROGRESS = "progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TodoOrder(StrEnum):
    """Sort direction for todo listings. Newest first by default."""

    NEWER = "newer"
    OLDER = "older"


class TodoOrderBy(StrEnum):
    """Timestamp a todo listing is sorted on."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class Credentials(BaseModel):
    username: str
    password: str


class User(BaseModel):
    """Snapshot of the account returned by login/register."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: UUID = Field(validation_alias=AliasChoices("id", "uuid"))
    username: str
    created_at: datetime


class AuthResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str = Field(min_length=1)
    user: User


class Todo(BaseModel):
    """Immutable snapshot of a todo as last seen on the service.

    Every mutation yields a new snapshot; instances are never updated in place.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: UUID = Field(validation_alias=AliasChoices("id", "uuid"))
    title: str
    status: TodoStatus
    owner_id: UUID
    created_at: datetime
    updated_at: datetime


class TodoPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Todo]
    total: int


class ServerMetadata(BaseModel):
    """Server build information. Unknown keys are preserved."""

    model_config = ConfigDict(frozen=True, extra="allow")

    version: str


class ServiceErrorPayload(BaseModel):
    """Structured error body the service sends with non-2xx responses."""

    model_config = ConfigDict(extra="ignore")

    status: int
    message: str
    code: str | None = None
    field: str | None = None
