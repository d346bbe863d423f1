"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Every method takes the request context so the backend can apply row-level
security as the calling user.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portal.application.dtos.records import (
        AnnouncementReadRecord,
        AnnouncementRecord,
        ChatChannelRecord,
        ChatMessageRecord,
        DocumentAnalyticsRecord,
        DocumentRecord,
        RoleRecord,
        UserRecord,
    )
    from portal.shared.context import RequestContext


class IAnnouncementRepository(Protocol):
    """Protocol for announcements and their read-facts."""

    async def list_created_since(
        self, ctx: RequestContext, since: datetime
    ) -> list[AnnouncementRecord]:
        """Announcements with created_at >= since, newest first."""

    async def list_all(self, ctx: RequestContext) -> list[AnnouncementRecord]:
        """All announcements visible to the caller, newest first."""

    async def list_reads(self, ctx: RequestContext) -> list[AnnouncementReadRecord]:
        """Every read-fact row (not windowed)."""


class IUserRepository(Protocol):
    """Protocol for users with their role embedded."""

    async def list_with_roles(self, ctx: RequestContext) -> list[UserRecord]:
        """All users with role name/level and department."""

    async def list_filtered(
        self,
        ctx: RequestContext,
        *,
        role: str | None = None,
        department: str | None = None,
    ) -> list[UserRecord]:
        """Users ordered by name, narrowed by role name and/or department."""

    async def get_by_id(self, ctx: RequestContext, user_id: str) -> UserRecord | None:
        """One user with role, or None."""

    async def get_with_role(
        self, user_id: str, access_token: str
    ) -> UserRecord | None:
        """One user with role, queried as the token's owner; None if not visible."""


class IRoleRepository(Protocol):
    """Protocol for roles."""

    async def list_by_level(self, ctx: RequestContext) -> list[RoleRecord]:
        """All roles, most privileged (lowest level) first."""

    async def get_by_id(self, ctx: RequestContext, role_id: str) -> RoleRecord | None:
        """One role, or None."""


class IDocumentRepository(Protocol):
    """Protocol for documents and the document analytics view."""

    async def list_analytics(
        self, ctx: RequestContext
    ) -> list[DocumentAnalyticsRecord]:
        """Rows of the analytics view, newest first."""

    async def list_counters(self, ctx: RequestContext) -> list[DocumentRecord]:
        """Raw documents with reads/downloads counters, newest first."""

    async def list_with_uploader(self, ctx: RequestContext) -> list[DocumentRecord]:
        """All documents with uploader name embedded, newest first."""


class IChatRepository(Protocol):
    """Protocol for chat channels and messages."""

    async def list_channels(self, ctx: RequestContext) -> list[ChatChannelRecord]:
        """All channels ordered by name."""

    async def get_channel(
        self, ctx: RequestContext, channel_id: str
    ) -> ChatChannelRecord | None:
        """One channel, or None if it does not exist."""

    async def list_messages(
        self, ctx: RequestContext, channel_id: str
    ) -> list[ChatMessageRecord]:
        """Messages in a channel, oldest first, with author embedded."""
