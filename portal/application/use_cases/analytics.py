"""Analytics use cases: announcement and document read/download reports.

Each report fans its independent queries out concurrently, then hands the
validated rows to the pure aggregators in application.services. Reports
are all-or-nothing: any failed query that has no fallback becomes
AnalyticsUnavailableException.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from portal.application.dtos.analytics import AnnouncementAnalytics, DocumentAnalytics
from portal.application.services import (
    aggregate_announcement_analytics,
    aggregate_document_analytics,
    aggregate_document_fallback,
)
from portal.domain.exceptions import AnalyticsUnavailableException, PortalException
from portal.shared.telemetry import add_span_attributes, traced
from portal.shared.utils import subtract_months, utc_now

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import (
        IAnnouncementRepository,
        IDocumentRepository,
        IUserRepository,
    )
    from portal.shared.context import RequestContext

logger = logging.getLogger(__name__)


class GetAnnouncementAnalyticsUseCase:
    """Read/unread report for announcements created in the trailing window."""

    def __init__(
        self,
        announcement_repo: IAnnouncementRepository,
        user_repo: IUserRepository,
        window_months: int = 6,
        recent_limit: int = 10,
    ) -> None:
        self.announcement_repo = announcement_repo
        self.user_repo = user_repo
        self.window_months = window_months
        self.recent_limit = recent_limit

    @traced("analytics.announcements")
    async def execute(self, ctx: RequestContext) -> AnnouncementAnalytics:
        """Build the announcement report as seen by the caller.

        Raises:
            AnalyticsUnavailableException: If any of the three queries fails.
        """
        since = subtract_months(utc_now(), self.window_months)
        try:
            announcements, reads, users = await asyncio.gather(
                self.announcement_repo.list_created_since(ctx, since),
                self.announcement_repo.list_reads(ctx),
                self.user_repo.list_with_roles(ctx),
            )
        except PortalException as e:
            logger.error(
                "Announcement analytics query failed (request_id=%s): %s",
                ctx.request_id,
                e.message,
            )
            raise AnalyticsUnavailableException("announcement") from e
        add_span_attributes(
            announcements=len(announcements), reads=len(reads), users=len(users)
        )
        return aggregate_announcement_analytics(
            announcements, reads, users, recent_limit=self.recent_limit
        )


class GetDocumentAnalyticsUseCase:
    """Read/download report for documents.

    Reads the document_analytics view; when that query errors (not when it
    is empty) the raw documents counters are used instead and the report
    carries no per-document stats and no type distribution.
    """

    def __init__(
        self,
        document_repo: IDocumentRepository,
        user_repo: IUserRepository,
        recent_limit: int = 10,
    ) -> None:
        self.document_repo = document_repo
        self.user_repo = user_repo
        self.recent_limit = recent_limit

    @traced("analytics.documents")
    async def execute(self, ctx: RequestContext) -> DocumentAnalytics:
        """Build the document report as seen by the caller.

        Raises:
            AnalyticsUnavailableException: If the user query fails, or the
                view and the fallback query both fail.
        """
        view_result, users_result = await asyncio.gather(
            self.document_repo.list_analytics(ctx),
            self.user_repo.list_with_roles(ctx),
            return_exceptions=True,
        )
        for result in (users_result, view_result):
            if isinstance(result, BaseException) and not isinstance(
                result, PortalException
            ):
                raise result
        if isinstance(users_result, PortalException):
            logger.error(
                "Document analytics user query failed (request_id=%s): %s",
                ctx.request_id,
                users_result.message,
            )
            raise AnalyticsUnavailableException("document") from users_result
        total_users = len(users_result)

        if not isinstance(view_result, PortalException):
            add_span_attributes(documents=len(view_result), fallback=False)
            return aggregate_document_analytics(
                view_result, total_users, recent_limit=self.recent_limit
            )

        logger.warning(
            "document_analytics view unavailable, falling back to documents table: %s",
            view_result.message,
        )
        try:
            documents = await self.document_repo.list_counters(ctx)
        except PortalException as e:
            logger.error(
                "Document analytics fallback query failed (request_id=%s): %s",
                ctx.request_id,
                e.message,
            )
            raise AnalyticsUnavailableException("document") from e
        add_span_attributes(documents=len(documents), fallback=True)
        return aggregate_document_fallback(
            documents, total_users, recent_limit=self.recent_limit
        )
