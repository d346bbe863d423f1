"""Role API schemas."""

from pydantic import BaseModel, ConfigDict


class RoleResponse(BaseModel):
    """Role row; lower level is more privileged."""

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    name: str | None = None
    level: int | None = None
    description: str | None = None
