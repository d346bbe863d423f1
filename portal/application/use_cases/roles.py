"""Role listing and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from portal.application.dtos.records import RoleRecord
    from portal.application.interfaces.repositories import IRoleRepository
    from portal.shared.context import RequestContext


class ListRolesUseCase:
    """All roles, most privileged first."""

    def __init__(self, role_repo: IRoleRepository) -> None:
        self.role_repo = role_repo

    async def execute(self, ctx: RequestContext) -> list[RoleRecord]:
        return await self.role_repo.list_by_level(ctx)


class GetRoleUseCase:
    """One role by id."""

    def __init__(self, role_repo: IRoleRepository) -> None:
        self.role_repo = role_repo

    async def execute(self, ctx: RequestContext, *, role_id: str) -> RoleRecord:
        role = await self.role_repo.get_by_id(ctx, role_id)
        if role is None:
            raise ResourceNotFoundException("role", role_id)
        return role
