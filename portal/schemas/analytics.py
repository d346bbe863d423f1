"""Analytics API schemas.

Field names are snake_case in Python and serialized camelCase, the shape
the portal's analytics dashboard reads.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys; built from DTO attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class AnnouncementOverviewResponse(CamelModel):
    total_announcements: int
    total_users: int
    total_reads: int
    total_unreads: int
    average_reads: float
    overall_read_percentage: float


class AnnouncementStatResponse(CamelModel):
    id: str
    title: str
    read_count: int
    unread_count: int
    read_percentage: int
    created_at: datetime


class AnnouncementMonthResponse(CamelModel):
    month: str
    total_reads: int
    total_unread: int
    average_read_rate: int


class UserReadStatusResponse(CamelModel):
    user_id: str
    user_name: str
    user_role: str
    user_department: str
    read_announcements: int
    unread_announcements: int


class AnnouncementAnalyticsResponse(CamelModel):
    """Response for GET /analytics/announcements."""

    overview: AnnouncementOverviewResponse
    recent_announcements: list[AnnouncementStatResponse]
    monthly_trend: list[AnnouncementMonthResponse]
    user_read_status: list[UserReadStatusResponse]


class DocumentOverviewResponse(CamelModel):
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


class DocumentStatResponse(CamelModel):
    """Per-document stats; the not-* and downloaded counts are absent on the fallback path."""

    id: str
    title: str
    read_count: int
    download_count: int
    downloaded_count: int | None = None
    not_read_count: int | None = None
    not_downloaded_count: int | None = None
    read_percentage: int
    download_percentage: int
    created_at: datetime


class DocumentMonthResponse(CamelModel):
    month: str
    documents: int
    total_reads: int
    total_downloads: int
    average_read_rate: int
    average_download_rate: int


class DocumentTypeShareResponse(CamelModel):
    type: str
    count: int
    percentage: int


class DocumentAnalyticsResponse(CamelModel):
    """Response for GET /analytics/documents (documentStats omitted on fallback)."""

    overview: DocumentOverviewResponse
    recent_documents: list[DocumentStatResponse]
    monthly_trend: list[DocumentMonthResponse]
    document_types: list[DocumentTypeShareResponse]
    document_stats: list[DocumentStatResponse] | None = None


class AnalyticsErrorResponse(BaseModel):
    """Body returned when a report cannot be built (500)."""

    error: str
