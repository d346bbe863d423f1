"""User directory API schemas."""

from pydantic import BaseModel, ConfigDict

from portal.schemas.role import RoleResponse


class UserResponse(BaseModel):
    """User row with its role embedded."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    avatar_url: str | None = None
    role_id: str | None = None
    role: RoleResponse | None = None
