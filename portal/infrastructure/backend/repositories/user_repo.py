"""Backend-backed user and role repositories (implement IUserRepository, IRoleRepository)."""

from __future__ import annotations

from portal.application.dtos.records import RoleRecord, UserRecord
from portal.infrastructure.backend.repositories.base import BackendRepository
from portal.infrastructure.backend.tables import TABLE_ROLES, TABLE_USERS
from portal.shared.context import RequestContext

# Users with their role embedded through the role_id foreign key.
_USER_WITH_ROLE = """
    id, name, email, department, position, avatar_url, role_id,
    role:role_id(id, name, level, description)
"""


class UserRepository(BackendRepository):
    """Users with embedded role."""

    async def list_with_roles(self, ctx: RequestContext) -> list[UserRecord]:
        """Return all users with role and department."""
        query = self._query(TABLE_USERS, ctx).select(_USER_WITH_ROLE)
        return await self._fetch(query, UserRecord)

    async def list_filtered(
        self,
        ctx: RequestContext,
        *,
        role: str | None = None,
        department: str | None = None,
    ) -> list[UserRecord]:
        """Return users ordered by name, optionally only one role and/or department."""
        columns = _USER_WITH_ROLE
        if role:
            # Inner join so the role filter drops users instead of nulling the embed.
            columns = columns.replace("role:role_id(", "role:role_id!inner(")
        query = self._query(TABLE_USERS, ctx).select(columns)
        if role:
            query = query.eq("role.name", role)
        if department:
            query = query.eq("department", department)
        return await self._fetch(query.order("name", ascending=True), UserRecord)

    async def get_by_id(self, ctx: RequestContext, user_id: str) -> UserRecord | None:
        """Return one user with role, or None."""
        query = (
            self._query(TABLE_USERS, ctx)
            .select(_USER_WITH_ROLE)
            .eq("id", user_id)
            .limit(1)
        )
        users = await self._fetch(query, UserRecord)
        return users[0] if users else None

    async def get_with_role(
        self, user_id: str, access_token: str
    ) -> UserRecord | None:
        """Return the user row as seen by the token owner, or None."""
        query = (
            self._client.table(TABLE_USERS, access_token=access_token)
            .select(_USER_WITH_ROLE)
            .eq("id", user_id)
            .limit(1)
        )
        users = await self._fetch(query, UserRecord)
        return users[0] if users else None


class RoleRepository(BackendRepository):
    """Roles ordered by privilege."""

    async def list_by_level(self, ctx: RequestContext) -> list[RoleRecord]:
        """Return all roles, lowest level (most privileged) first."""
        query = self._query(TABLE_ROLES, ctx).order("level", ascending=True)
        return await self._fetch(query, RoleRecord)

    async def get_by_id(self, ctx: RequestContext, role_id: str) -> RoleRecord | None:
        """Return one role, or None."""
        query = self._query(TABLE_ROLES, ctx).eq("id", role_id).limit(1)
        roles = await self._fetch(query, RoleRecord)
        return roles[0] if roles else None
