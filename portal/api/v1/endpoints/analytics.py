"""Analytics API: announcement and document read/download reports."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from portal.api.v1.dependencies import (
    CurrentContext,
    get_announcement_analytics_use_case,
    get_document_analytics_use_case,
)
from portal.application.use_cases import (
    GetAnnouncementAnalyticsUseCase,
    GetDocumentAnalyticsUseCase,
)
from portal.core.limiter import limit_analytics
from portal.schemas.analytics import (
    AnalyticsErrorResponse,
    AnnouncementAnalyticsResponse,
    DocumentAnalyticsResponse,
)

router = APIRouter()

_ERRORS = {500: {"model": AnalyticsErrorResponse, "description": "Report unavailable"}}


@router.get(
    "/announcements",
    response_model=AnnouncementAnalyticsResponse,
    responses=_ERRORS,
)
@limit_analytics
async def announcement_analytics(
    request: Request,
    ctx: CurrentContext,
    use_case: Annotated[
        GetAnnouncementAnalyticsUseCase, Depends(get_announcement_analytics_use_case)
    ],
):
    """Read/unread report over announcements from the last six months."""
    report = await use_case.execute(ctx)
    return AnnouncementAnalyticsResponse.model_validate(report)


@router.get(
    "/documents",
    response_model=DocumentAnalyticsResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
)
@limit_analytics
async def document_analytics(
    request: Request,
    ctx: CurrentContext,
    use_case: Annotated[
        GetDocumentAnalyticsUseCase, Depends(get_document_analytics_use_case)
    ],
):
    """Read/download report over all documents.

    When the analytics view is unavailable the report is built from raw
    counters and documentStats is omitted.
    """
    report = await use_case.execute(ctx)
    return DocumentAnalyticsResponse.model_validate(report)
