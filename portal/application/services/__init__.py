"""Application services: pure analytics aggregation."""

from portal.application.services.announcement_analytics import (
    aggregate_announcement_analytics,
)
from portal.application.services.document_analytics import (
    aggregate_document_analytics,
    aggregate_document_fallback,
)

__all__ = [
    "aggregate_announcement_analytics",
    "aggregate_document_analytics",
    "aggregate_document_fallback",
]
