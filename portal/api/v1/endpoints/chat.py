"""Chat API: accessible channels and channel messages."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import (
    CurrentContext,
    get_list_channels_use_case,
    get_list_messages_use_case,
)
from portal.application.use_cases import ListChannelMessagesUseCase, ListChannelsUseCase
from portal.schemas.chat import ChatChannelResponse, ChatMessageResponse

router = APIRouter()


@router.get("/channels", response_model=list[ChatChannelResponse])
async def list_channels(
    ctx: CurrentContext,
    use_case: Annotated[ListChannelsUseCase, Depends(get_list_channels_use_case)],
):
    """Channels the caller may access, ordered by name."""
    channels = await use_case.execute(ctx)
    return [ChatChannelResponse.model_validate(c) for c in channels]


@router.get(
    "/{channel_id}/messages",
    response_model=list[ChatMessageResponse],
    responses={403: {"description": "Channel not accessible"}, 404: {"description": "Channel not found"}},
)
async def list_messages(
    channel_id: str,
    ctx: CurrentContext,
    use_case: Annotated[ListChannelMessagesUseCase, Depends(get_list_messages_use_case)],
):
    """Messages in the channel, oldest first."""
    messages = await use_case.execute(ctx, channel_id=channel_id)
    return [ChatMessageResponse.model_validate(m) for m in messages]
