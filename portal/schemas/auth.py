"""Auth/session API schemas."""

from pydantic import BaseModel, ConfigDict


class SessionResponse(BaseModel):
    """The authenticated caller as resolved from the bearer token and users table."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: str | None = None
    name: str | None = None
    department: str | None = None
    role_name: str | None = None
    role_level: int | None = None
    is_administrator: bool = False
