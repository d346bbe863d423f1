"""Announcement API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portal.application.use_cases.announcements import AnnouncementView


class AnnouncementResponse(BaseModel):
    """Announcement row as stored, plus resolved authorName and authorAvatar."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    user_id: str | None = None
    author: str | None = None
    department: str | None = None
    departments: list[str] = Field(default_factory=list)
    priority: str
    pinned: bool
    views: int
    likes: int
    comments: int
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime | None = None
    author_name: str = Field(alias="authorName")
    author_avatar: str | None = Field(default=None, alias="authorAvatar")

    @classmethod
    def from_view(cls, view: AnnouncementView) -> "AnnouncementResponse":
        return cls(
            **view.announcement.model_dump(),
            author_name=view.author_name,
            author_avatar=view.author_avatar,
        )
