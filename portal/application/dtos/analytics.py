"""DTOs for the analytics reports (no dependency on HTTP or backend rows)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class AnnouncementOverview:
    """Headline totals for the announcement report."""

    total_announcements: int
    total_users: int
    total_reads: int
    total_unreads: int
    average_reads: float
    overall_read_percentage: float


@dataclass(frozen=True)
class AnnouncementStat:
    """Read statistics for one recent announcement."""

    id: str
    title: str
    read_count: int
    unread_count: int
    read_percentage: int
    created_at: datetime


@dataclass(frozen=True)
class AnnouncementMonth:
    """Read/unread totals for announcements created in one calendar month."""

    month: str
    total_reads: int
    total_unread: int
    average_read_rate: int


@dataclass(frozen=True)
class UserReadStatus:
    """How many in-window announcements one user has read."""

    user_id: str
    user_name: str
    user_role: str
    user_department: str
    read_announcements: int
    unread_announcements: int


@dataclass(frozen=True)
class AnnouncementAnalytics:
    """Full announcement analytics report."""

    overview: AnnouncementOverview
    recent_announcements: list[AnnouncementStat]
    monthly_trend: list[AnnouncementMonth]
    user_read_status: list[UserReadStatus]


@dataclass(frozen=True)
class DocumentOverview:
    """Headline totals for the document report."""

    total_documents: int
    total_users: int
    total_reads: int
    total_downloads: int
    average_reads: int
    average_downloads: int
    total_read: int
    total_not_read: int
    total_downloaded: int
    total_not_downloaded: int
    overall_read_percentage: int
    overall_download_percentage: int


@dataclass(frozen=True)
class DocumentStat:
    """Read/download statistics for one document.

    not_read_count and not_downloaded_count are None on the fallback path,
    which reports only the raw counters.
    """

    id: str
    title: str
    read_count: int
    download_count: int
    read_percentage: int
    download_percentage: int
    created_at: datetime
    downloaded_count: int | None = None
    not_read_count: int | None = None
    not_downloaded_count: int | None = None


@dataclass(frozen=True)
class DocumentMonth:
    """Totals for documents created in one calendar month."""

    month: str
    documents: int
    total_reads: int
    total_downloads: int
    average_read_rate: int
    average_download_rate: int


@dataclass(frozen=True)
class DocumentTypeShare:
    """Count and share of one document type."""

    type: str
    count: int
    percentage: int


@dataclass(frozen=True)
class DocumentAnalytics:
    """Full document analytics report.

    document_stats is None when the report was built from the raw documents
    table because the analytics view was unavailable.
    """

    overview: DocumentOverview
    recent_documents: list[DocumentStat]
    monthly_trend: list[DocumentMonth] = field(default_factory=list)
    document_types: list[DocumentTypeShare] = field(default_factory=list)
    document_stats: list[DocumentStat] | None = None

    @property
    def from_fallback(self) -> bool:
        """True when the view failed and raw document counters were used."""
        return self.document_stats is None
