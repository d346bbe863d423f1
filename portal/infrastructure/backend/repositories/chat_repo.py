"""Backend-backed chat repository (implements IChatRepository)."""

from __future__ import annotations

from portal.application.dtos.records import ChatChannelRecord, ChatMessageRecord
from portal.infrastructure.backend.repositories.base import BackendRepository
from portal.infrastructure.backend.tables import (
    TABLE_CHAT_CHANNELS,
    TABLE_CHAT_MESSAGES,
)
from portal.shared.context import RequestContext

_MESSAGE_WITH_AUTHOR = (
    "*, user:user_id(id, name, role_id, avatar_url, role:role_id(name))"
)


class ChatRepository(BackendRepository):
    """Chat channels and messages."""

    async def list_channels(self, ctx: RequestContext) -> list[ChatChannelRecord]:
        """Return all channels ordered by name."""
        query = self._query(TABLE_CHAT_CHANNELS, ctx).order("name", ascending=True)
        return await self._fetch(query, ChatChannelRecord)

    async def get_channel(
        self, ctx: RequestContext, channel_id: str
    ) -> ChatChannelRecord | None:
        """Return one channel or None."""
        query = self._query(TABLE_CHAT_CHANNELS, ctx).eq("id", channel_id).limit(1)
        channels = await self._fetch(query, ChatChannelRecord)
        return channels[0] if channels else None

    async def list_messages(
        self, ctx: RequestContext, channel_id: str
    ) -> list[ChatMessageRecord]:
        """Return messages in the channel, oldest first."""
        query = (
            self._query(TABLE_CHAT_MESSAGES, ctx)
            .select(_MESSAGE_WITH_AUTHOR)
            .eq("channel_id", channel_id)
            .order("timestamp", ascending=True)
        )
        return await self._fetch(query, ChatMessageRecord)
