"""User directory lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.domain.exceptions import ResourceNotFoundException
from portal.shared.telemetry import traced

if TYPE_CHECKING:
    from portal.application.dtos.records import UserRecord
    from portal.application.interfaces.repositories import IUserRepository
    from portal.shared.context import RequestContext


class ListUsersUseCase:
    """Users with their role, ordered by name."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    @traced("users.list")
    async def execute(
        self,
        ctx: RequestContext,
        *,
        role: str | None = None,
        department: str | None = None,
    ) -> list[UserRecord]:
        return await self.user_repo.list_filtered(ctx, role=role, department=department)


class GetUserUseCase:
    """One user with role."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    @traced("users.get")
    async def execute(self, ctx: RequestContext, *, user_id: str) -> UserRecord:
        """Return the user.

        Raises:
            ResourceNotFoundException: If no such user is visible to the caller.
        """
        user = await self.user_repo.get_by_id(ctx, user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user
