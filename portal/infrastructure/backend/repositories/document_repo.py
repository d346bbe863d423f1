"""Backend-backed document repository (implements IDocumentRepository)."""

from __future__ import annotations

from portal.application.dtos.records import DocumentAnalyticsRecord, DocumentRecord
from portal.infrastructure.backend.repositories.base import BackendRepository
from portal.infrastructure.backend.tables import (
    TABLE_DOCUMENTS,
    VIEW_DOCUMENT_ANALYTICS,
)
from portal.shared.context import RequestContext


class DocumentRepository(BackendRepository):
    """Documents, their denormalized counters, and the analytics view."""

    async def list_analytics(
        self, ctx: RequestContext
    ) -> list[DocumentAnalyticsRecord]:
        """Return document_analytics view rows, newest first."""
        query = self._query(VIEW_DOCUMENT_ANALYTICS, ctx).order(
            "created_at", ascending=False
        )
        return await self._fetch(query, DocumentAnalyticsRecord)

    async def list_counters(self, ctx: RequestContext) -> list[DocumentRecord]:
        """Return id, name, created_at and raw reads/downloads counters, newest first."""
        query = (
            self._query(TABLE_DOCUMENTS, ctx)
            .select("id, name, created_at, reads, downloads")
            .order("created_at", ascending=False)
        )
        return await self._fetch(query, DocumentRecord)

    async def list_with_uploader(self, ctx: RequestContext) -> list[DocumentRecord]:
        """Return all documents with the uploader's name, newest first."""
        query = (
            self._query(TABLE_DOCUMENTS, ctx)
            .select("*, uploaded_by_user:uploaded_by(name)")
            .order("created_at", ascending=False)
        )
        return await self._fetch(query, DocumentRecord)
