"""Announcements API: list with department/priority filters and author info."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.api.v1.dependencies import CurrentContext, get_list_announcements_use_case
from portal.application.use_cases import ListAnnouncementsUseCase
from portal.schemas.announcement import AnnouncementResponse

router = APIRouter()


@router.get("", response_model=list[AnnouncementResponse])
async def list_announcements(
    ctx: CurrentContext,
    use_case: Annotated[ListAnnouncementsUseCase, Depends(get_list_announcements_use_case)],
    department: Annotated[
        str | None, Query(description="Department name, or 'all'")
    ] = None,
    priority: Annotated[
        str | None, Query(description="low, medium, high, or 'all'")
    ] = None,
):
    """Announcements newest first, each with authorName and authorAvatar."""
    views = await use_case.execute(ctx, department=department, priority=priority)
    return [AnnouncementResponse.from_view(v) for v in views]
