"""Users API: directory listing with role/department filters and single lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.api.v1.dependencies import (
    CurrentContext,
    get_list_users_use_case,
    get_user_use_case,
)
from portal.application.use_cases import GetUserUseCase, ListUsersUseCase
from portal.schemas.user import UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    ctx: CurrentContext,
    use_case: Annotated[ListUsersUseCase, Depends(get_list_users_use_case)],
    role: Annotated[str | None, Query(description="Role name")] = None,
    department: Annotated[str | None, Query()] = None,
):
    """Users with their role, ordered by name."""
    users = await use_case.execute(ctx, role=role, department=department)
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: str,
    ctx: CurrentContext,
    use_case: Annotated[GetUserUseCase, Depends(get_user_use_case)],
):
    user = await use_case.execute(ctx, user_id=user_id)
    return UserResponse.model_validate(user)
