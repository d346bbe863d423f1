"""Chat API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ChatChannelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    required_role: str | None = None
    department: str | None = None


class MessageAuthorRole(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str | None = None


class MessageAuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    avatar_url: str | None = None
    role: MessageAuthorRole | None = None


class ChatMessageResponse(BaseModel):
    """Message with the author's name, avatar and role name embedded."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    channel_id: str
    user_id: str | None = None
    message: str
    timestamp: datetime
    user: MessageAuthorResponse | None = None
