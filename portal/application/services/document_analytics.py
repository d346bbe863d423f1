"""Document analytics aggregation.

Two sources produce the same overview shape: rows of the document_analytics
view (primary) and raw documents rows with denormalized counters (used
when the view query fails). Monthly trend and type distribution are
computed from the rows themselves; the fallback rows carry no type, so
the fallback report has an empty type distribution rather than invented
numbers.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from datetime import datetime
from typing import NamedTuple

from portal.application.dtos.analytics import (
    DocumentAnalytics,
    DocumentMonth,
    DocumentOverview,
    DocumentStat,
    DocumentTypeShare,
)
from portal.application.dtos.records import DocumentAnalyticsRecord, DocumentRecord
from portal.shared.utils import month_key, percentage, round_int

OTHER_TYPE = "other"


class _Counts(NamedTuple):
    created_at: datetime
    reads: int
    downloads: int


def _average(total: int, count: int) -> int:
    return round_int(total / count) if count else 0


def _coverage(total: int, users: int, documents: int) -> int:
    """Share of all (user, document) pairs covered by total, as a whole percentage."""
    if users <= 0 or documents <= 0:
        return 0
    return round_int(percentage(total, users * documents))


def build_document_stat(row: DocumentAnalyticsRecord, total_users: int) -> DocumentStat:
    """Per-document statistics from one analytics-view row."""
    return DocumentStat(
        id=row.id,
        title=row.title,
        read_count=row.read_count,
        download_count=row.download_count,
        downloaded_count=row.download_count,
        not_read_count=max(0, total_users - row.read_count),
        not_downloaded_count=max(0, total_users - row.download_count),
        read_percentage=round_int(percentage(row.read_count, total_users)),
        download_percentage=round_int(percentage(row.download_count, total_users)),
        created_at=row.created_at,
    )


def build_monthly_trend(
    counts: Sequence[_Counts], total_users: int
) -> list[DocumentMonth]:
    """Bucket documents by creation month; rates are per (user, document) pair."""
    buckets: dict[str, list[int]] = defaultdict(lambda: [0, 0, 0])
    for item in counts:
        bucket = buckets[month_key(item.created_at)]
        bucket[0] += 1
        bucket[1] += item.reads
        bucket[2] += item.downloads
    return [
        DocumentMonth(
            month=month,
            documents=documents,
            total_reads=reads,
            total_downloads=downloads,
            average_read_rate=_coverage(reads, total_users, documents),
            average_download_rate=_coverage(downloads, total_users, documents),
        )
        for month, (documents, reads, downloads) in sorted(buckets.items())
    ]


def build_document_types(
    rows: Sequence[DocumentAnalyticsRecord],
) -> list[DocumentTypeShare]:
    """Count documents per type (missing type is 'other'), largest first."""
    counts = Counter((row.type or OTHER_TYPE) for row in rows)
    total = len(rows)
    return [
        DocumentTypeShare(
            type=doc_type,
            count=count,
            percentage=round_int(percentage(count, total)),
        )
        for doc_type, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def aggregate_document_analytics(
    rows: Sequence[DocumentAnalyticsRecord],
    total_users: int,
    recent_limit: int = 10,
) -> DocumentAnalytics:
    """Build the document report from analytics-view rows (newest first)."""
    stats = [build_document_stat(row, total_users) for row in rows]
    total_documents = len(rows)
    total_reads = sum(row.read_count for row in rows)
    total_downloads = sum(row.download_count for row in rows)
    total_read = sum(s.read_count for s in stats)
    total_downloaded = sum(s.downloaded_count or 0 for s in stats)
    overview = DocumentOverview(
        total_documents=total_documents,
        total_users=total_users,
        total_reads=total_reads,
        total_downloads=total_downloads,
        average_reads=_average(total_reads, total_documents),
        average_downloads=_average(total_downloads, total_documents),
        total_read=total_read,
        total_not_read=sum(s.not_read_count or 0 for s in stats),
        total_downloaded=total_downloaded,
        total_not_downloaded=sum(s.not_downloaded_count or 0 for s in stats),
        overall_read_percentage=_coverage(total_read, total_users, total_documents),
        overall_download_percentage=_coverage(
            total_downloaded, total_users, total_documents
        ),
    )
    counts = [_Counts(r.created_at, r.read_count, r.download_count) for r in rows]
    return DocumentAnalytics(
        overview=overview,
        recent_documents=stats[:recent_limit],
        monthly_trend=build_monthly_trend(counts, total_users),
        document_types=build_document_types(rows),
        document_stats=stats,
    )


def aggregate_document_fallback(
    documents: Sequence[DocumentRecord],
    total_users: int,
    recent_limit: int = 10,
) -> DocumentAnalytics:
    """Build the reduced document report from raw documents rows (newest first)."""
    total_documents = len(documents)
    total_reads = sum(doc.reads for doc in documents)
    total_downloads = sum(doc.downloads for doc in documents)
    pairs = total_users * total_documents
    overview = DocumentOverview(
        total_documents=total_documents,
        total_users=total_users,
        total_reads=total_reads,
        total_downloads=total_downloads,
        average_reads=_average(total_reads, total_documents),
        average_downloads=_average(total_downloads, total_documents),
        total_read=total_reads,
        total_not_read=max(0, pairs - total_reads),
        total_downloaded=total_downloads,
        total_not_downloaded=max(0, pairs - total_downloads),
        overall_read_percentage=_coverage(total_reads, total_users, total_documents),
        overall_download_percentage=_coverage(
            total_downloads, total_users, total_documents
        ),
    )
    recent = [
        DocumentStat(
            id=doc.id,
            title=doc.name,
            read_count=doc.reads,
            download_count=doc.downloads,
            read_percentage=round_int(percentage(doc.reads, total_users)),
            download_percentage=round_int(percentage(doc.downloads, total_users)),
            created_at=doc.created_at,
        )
        for doc in documents[:recent_limit]
    ]
    counts = [_Counts(d.created_at, d.reads, d.downloads) for d in documents]
    return DocumentAnalytics(
        overview=overview,
        recent_documents=recent,
        monthly_trend=build_monthly_trend(counts, total_users),
        document_types=[],
        document_stats=None,
    )
