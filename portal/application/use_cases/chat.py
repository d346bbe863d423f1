"""Chat use cases: role/department-gated channels and their messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.domain.access import can_access_channel
from portal.domain.exceptions import AuthorizationException, ResourceNotFoundException
from portal.shared.telemetry import traced

if TYPE_CHECKING:
    from portal.application.dtos.records import ChatChannelRecord, ChatMessageRecord
    from portal.application.interfaces.repositories import IChatRepository
    from portal.shared.context import RequestContext


class ListChannelsUseCase:
    """Channels the caller's role and department allow, ordered by name."""

    def __init__(self, chat_repo: IChatRepository) -> None:
        self.chat_repo = chat_repo

    @traced("chat.channels")
    async def execute(self, ctx: RequestContext) -> list[ChatChannelRecord]:
        channels = await self.chat_repo.list_channels(ctx)
        return [c for c in channels if can_access_channel(ctx, c)]


class ListChannelMessagesUseCase:
    """Messages of one channel, oldest first."""

    def __init__(self, chat_repo: IChatRepository) -> None:
        self.chat_repo = chat_repo

    @traced("chat.messages")
    async def execute(
        self, ctx: RequestContext, *, channel_id: str
    ) -> list[ChatMessageRecord]:
        """Return the channel's messages.

        Raises:
            ResourceNotFoundException: If the channel does not exist.
            AuthorizationException: If the caller may not access the channel.
        """
        channel = await self.chat_repo.get_channel(ctx, channel_id)
        if channel is None:
            raise ResourceNotFoundException("channel", channel_id)
        if not can_access_channel(ctx, channel):
            raise AuthorizationException("channel", "read")
        return await self.chat_repo.list_messages(ctx, channel_id)
