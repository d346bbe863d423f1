"""Request-scoped actor context.

Built once per request by the authentication dependency and passed
explicitly into use cases and repositories. Nothing reads it from
ambient/global state.

Usage:
    ctx = RequestContext(user_id="u1", access_token=token, role_level=3)
    documents = await use_case.list_visible(ctx)
"""

from dataclasses import dataclass

from portal.domain.enums import UNKNOWN_ROLE_LEVEL, RoleName


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the authenticated caller for one request.

    Attributes:
        user_id: Subject of the verified access token.
        access_token: Raw bearer token; forwarded to the backend so row-level
            security is evaluated as this user.
        email: Email claim from the token, when present.
        name: Display name from the users table.
        department: Department from the users table.
        role_name: Joined role name (None when the user has no role).
        role_level: Joined role level (None when the user has no role).
        request_id: Request ID assigned by middleware, for log correlation.
    """

    user_id: str
    access_token: str
    email: str | None = None
    name: str | None = None
    department: str | None = None
    role_name: str | None = None
    role_level: int | None = None
    request_id: str | None = None

    @property
    def effective_level(self) -> int:
        """Role level used for comparisons; falls back to the name map, then least privileged."""
        if self.role_level is not None:
            return self.role_level
        if self.role_name in RoleName.values():
            return RoleName(self.role_name).level
        return UNKNOWN_ROLE_LEVEL

    @property
    def is_administrator(self) -> bool:
        """True when the caller holds the Administrator role."""
        return self.role_name == RoleName.ADMINISTRATOR.value
