"""Typed rows returned by the hosted backend.

Every row is validated here before it reaches application code, so the
aggregators never see missing keys or nulls where a number is expected.
Nullable counters and lists coming back from the database are normalized
to 0 / [] at this boundary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def _to_str(value: Any) -> Any:
    return str(value) if isinstance(value, int) else value


def _none_to_zero(value: Any) -> Any:
    return 0 if value is None else value


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


def _unwrap_single(value: Any) -> Any:
    """Embedded to-one relations may come back as an object or a one-element list."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


RowId = Annotated[str, BeforeValidator(_to_str)]
Counter = Annotated[int, BeforeValidator(_none_to_zero)]
StrList = Annotated[list[str], BeforeValidator(_none_to_list)]


class RecordModel(BaseModel):
    """Base for backend rows: unknown columns ignored, instances immutable."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RoleRecord(RecordModel):
    """Row of the roles table (or an embedded role)."""

    id: RowId | None = None
    name: str | None = None
    level: int | None = None
    description: str | None = None


class UserRecord(RecordModel):
    """Row of the users table with its role embedded."""

    id: RowId
    name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    avatar_url: str | None = None
    role_id: RowId | None = None
    role: RoleRecord | None = Field(
        default=None, validation_alias=AliasChoices("role", "roles")
    )

    @field_validator("role", mode="before")
    @classmethod
    def _unwrap_role(cls, value: Any) -> Any:
        return _unwrap_single(value)


class AnnouncementRecord(RecordModel):
    """Row of the announcements table."""

    id: RowId
    title: str = ""
    content: str = ""
    user_id: RowId | None = None
    author: str | None = None
    department: str | None = None
    departments: StrList = Field(default_factory=list)
    priority: str = "medium"
    pinned: bool = False
    views: Counter = 0
    likes: Counter = 0
    comments: Counter = 0
    tags: StrList = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, value: Any) -> Any:
        return value or "medium"

    @field_validator("pinned", mode="before")
    @classmethod
    def _default_pinned(cls, value: Any) -> Any:
        return bool(value)


class AnnouncementReadRecord(RecordModel):
    """Read-fact: whether one user has read one announcement. Null is_read means unread."""

    announcement_id: RowId
    user_id: RowId
    is_read: bool | None = None


class UploaderRecord(RecordModel):
    """Embedded uploader summary on a document row."""

    name: str | None = None


class DocumentRecord(RecordModel):
    """Row of the documents table, with denormalized read/download counters."""

    id: RowId
    name: str = ""
    type: str | None = None
    size: str | None = None
    content_url: str | None = None
    uploaded_by: RowId | None = None
    uploaded_by_user: UploaderRecord | None = None
    department: str | None = None
    departments: StrList = Field(default_factory=list)
    access_level: str | None = None
    access_levels: StrList = Field(default_factory=list)
    reads: Counter = 0
    downloads: Counter = 0
    views: Counter = 0
    shared: bool = False
    created_at: datetime

    @field_validator("uploaded_by_user", mode="before")
    @classmethod
    def _unwrap_uploader(cls, value: Any) -> Any:
        return _unwrap_single(value)

    @field_validator("shared", mode="before")
    @classmethod
    def _default_shared(cls, value: Any) -> Any:
        return bool(value)


class DocumentAnalyticsRecord(RecordModel):
    """Row of the document_analytics reporting view."""

    id: RowId
    title: str = Field(default="", validation_alias=AliasChoices("title", "name"))
    type: str | None = None
    read_count: Counter = 0
    download_count: Counter = 0
    created_at: datetime

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, value: Any) -> Any:
        return value or ""


class ChatChannelRecord(RecordModel):
    """Row of the chat_channels table."""

    id: RowId
    name: str
    type: str = "public"
    required_role: str | None = Field(
        default=None, validation_alias=AliasChoices("required_role", "requiredRole")
    )
    department: str | None = None


class MessageAuthorRecord(RecordModel):
    """Embedded author of a chat message."""

    id: RowId
    name: str | None = None
    avatar_url: str | None = None
    role: RoleRecord | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _unwrap_role(cls, value: Any) -> Any:
        return _unwrap_single(value)


class ChatMessageRecord(RecordModel):
    """Row of the chat_messages table with the author embedded."""

    id: RowId
    channel_id: RowId
    user_id: RowId | None = None
    message: str = ""
    timestamp: datetime
    user: MessageAuthorRecord | None = None

    @field_validator("user", mode="before")
    @classmethod
    def _unwrap_user(cls, value: Any) -> Any:
        return _unwrap_single(value)
