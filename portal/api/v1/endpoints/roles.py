"""Roles API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import (
    CurrentContext,
    get_list_roles_use_case,
    get_role_use_case,
)
from portal.application.use_cases import GetRoleUseCase, ListRolesUseCase
from portal.schemas.role import RoleResponse

router = APIRouter()


@router.get("", response_model=list[RoleResponse])
async def list_roles(
    ctx: CurrentContext,
    use_case: Annotated[ListRolesUseCase, Depends(get_list_roles_use_case)],
):
    """All roles, most privileged first."""
    roles = await use_case.execute(ctx)
    return [RoleResponse.model_validate(r) for r in roles]


@router.get(
    "/{role_id}",
    response_model=RoleResponse,
    responses={404: {"description": "Role not found"}},
)
async def get_role(
    role_id: str,
    ctx: CurrentContext,
    use_case: Annotated[GetRoleUseCase, Depends(get_role_use_case)],
):
    role = await use_case.execute(ctx, role_id=role_id)
    return RoleResponse.model_validate(role)
