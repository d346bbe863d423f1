"""Announcement listing: department/priority filtering and author enrichment."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from portal.domain.access import targets_department
from portal.domain.exceptions import PortalException
from portal.shared.telemetry import traced

if TYPE_CHECKING:
    from portal.application.dtos.records import AnnouncementRecord, UserRecord
    from portal.application.interfaces.repositories import (
        IAnnouncementRepository,
        IUserRepository,
    )
    from portal.shared.context import RequestContext

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown User"
# Filter value meaning "do not filter".
ANY = "all"


@dataclass(frozen=True)
class AnnouncementView:
    """Announcement row plus resolved author name and avatar."""

    announcement: AnnouncementRecord
    author_name: str
    author_avatar: str | None


def matches_filters(
    announcement: AnnouncementRecord,
    department: str | None = None,
    priority: str | None = None,
) -> bool:
    """True when the announcement passes the optional priority and department filters."""
    if priority and priority != ANY and announcement.priority != priority:
        return False
    if department and department != ANY:
        return targets_department(
            announcement.departments, announcement.department, department
        )
    return True


class ListAnnouncementsUseCase:
    """List announcements newest first, each with its author resolved."""

    def __init__(
        self,
        announcement_repo: IAnnouncementRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.announcement_repo = announcement_repo
        self.user_repo = user_repo

    @traced("announcements.list")
    async def execute(
        self,
        ctx: RequestContext,
        *,
        department: str | None = None,
        priority: str | None = None,
    ) -> list[AnnouncementView]:
        """Return filtered announcements.

        A failed user lookup only degrades author names to the legacy
        author string; a failed announcement query propagates.
        """
        announcements, users = await asyncio.gather(
            self.announcement_repo.list_all(ctx),
            self.user_repo.list_with_roles(ctx),
            return_exceptions=True,
        )
        if isinstance(announcements, BaseException):
            raise announcements
        if isinstance(users, PortalException):
            logger.warning("Author lookup failed, using legacy author: %s", users.message)
            users = []
        elif isinstance(users, BaseException):
            raise users

        by_id: dict[str, UserRecord] = {u.id: u for u in users}
        views: list[AnnouncementView] = []
        for announcement in announcements:
            if not matches_filters(announcement, department, priority):
                continue
            author = by_id.get(announcement.user_id) if announcement.user_id else None
            views.append(
                AnnouncementView(
                    announcement=announcement,
                    author_name=(author.name if author else None)
                    or announcement.author
                    or UNKNOWN_AUTHOR,
                    author_avatar=author.avatar_url if author else None,
                )
            )
        return views
