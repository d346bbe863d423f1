"""Resolve a verified access token into the request context."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from portal.domain.exceptions import AuthenticationException
from portal.shared.context import RequestContext

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import IUserRepository

logger = logging.getLogger(__name__)


class ResolveSessionUseCase:
    """Load the token owner's user row (with role) and build RequestContext."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    async def execute(
        self,
        claims: dict[str, Any],
        access_token: str,
        request_id: str | None = None,
    ) -> RequestContext:
        """Build the context for the token's subject.

        Raises:
            AuthenticationException: If the user row is not visible to the token.
        """
        user_id = str(claims["sub"])
        user = await self.user_repo.get_with_role(user_id, access_token)
        if user is None:
            logger.info("Token subject %s has no user row", user_id)
            raise AuthenticationException("User not found")
        role = user.role
        return RequestContext(
            user_id=user.id,
            access_token=access_token,
            email=user.email or claims.get("email"),
            name=user.name,
            department=user.department,
            role_name=role.name if role else None,
            role_level=role.level if role else None,
            request_id=request_id,
        )
