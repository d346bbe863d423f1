"""Backend-backed announcement repository (implements IAnnouncementRepository)."""

from __future__ import annotations

from datetime import datetime

from portal.application.dtos.records import AnnouncementReadRecord, AnnouncementRecord
from portal.infrastructure.backend.repositories.base import BackendRepository
from portal.infrastructure.backend.tables import (
    TABLE_ANNOUNCEMENT_READS,
    TABLE_ANNOUNCEMENTS,
)
from portal.shared.context import RequestContext
from portal.shared.utils.datetime import ensure_utc


class AnnouncementRepository(BackendRepository):
    """Announcements and announcement read-facts."""

    async def list_created_since(
        self, ctx: RequestContext, since: datetime
    ) -> list[AnnouncementRecord]:
        """Return announcements with created_at >= since, newest first."""
        query = (
            self._query(TABLE_ANNOUNCEMENTS, ctx)
            .select("id, title, created_at")
            .gte("created_at", ensure_utc(since).isoformat())
            .order("created_at", ascending=False)
        )
        return await self._fetch(query, AnnouncementRecord)

    async def list_all(self, ctx: RequestContext) -> list[AnnouncementRecord]:
        """Return all announcements, newest first."""
        query = self._query(TABLE_ANNOUNCEMENTS, ctx).order(
            "created_at", ascending=False
        )
        return await self._fetch(query, AnnouncementRecord)

    async def list_reads(self, ctx: RequestContext) -> list[AnnouncementReadRecord]:
        """Return every read-fact row."""
        query = self._query(TABLE_ANNOUNCEMENT_READS, ctx).select(
            "announcement_id, user_id, is_read"
        )
        return await self._fetch(query, AnnouncementReadRecord)
