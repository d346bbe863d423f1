"""Document listing filtered by the caller's access level and department."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from portal.domain.access import can_delete_document, can_view_document
from portal.shared.telemetry import traced

if TYPE_CHECKING:
    from portal.application.dtos.records import DocumentRecord
    from portal.application.interfaces.repositories import IDocumentRepository
    from portal.shared.context import RequestContext


@dataclass(frozen=True)
class DocumentView:
    """Visible document with the caller's delete permission resolved."""

    document: DocumentRecord
    uploaded_by_name: str | None
    can_delete: bool


class ListDocumentsUseCase:
    """Documents the caller may view, newest first."""

    def __init__(self, document_repo: IDocumentRepository) -> None:
        self.document_repo = document_repo

    @traced("documents.list")
    async def execute(self, ctx: RequestContext) -> list[DocumentView]:
        documents = await self.document_repo.list_with_uploader(ctx)
        return [
            DocumentView(
                document=doc,
                uploaded_by_name=doc.uploaded_by_user.name
                if doc.uploaded_by_user
                else None,
                can_delete=can_delete_document(ctx, doc),
            )
            for doc in documents
            if can_view_document(ctx, doc)
        ]
