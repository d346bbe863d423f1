"""Unit tests for document analytics aggregation (view and fallback paths)."""

from portal.application.dtos.records import DocumentAnalyticsRecord, DocumentRecord
from portal.application.services.document_analytics import (
    aggregate_document_analytics,
    aggregate_document_fallback,
    build_document_types,
)


def _view_row(did: str, doc_type: str | None, reads: int, downloads: int, created_at: str):
    return DocumentAnalyticsRecord.model_validate(
        {
            "id": did,
            "title": f"Doc {did}",
            "type": doc_type,
            "read_count": reads,
            "download_count": downloads,
            "created_at": created_at,
        }
    )


VIEW_ROWS = [
    _view_row("d1", "pdf", 3, 1, "2026-09-05T10:00:00Z"),
    _view_row("d2", "pdf", 1, 0, "2026-09-01T10:00:00Z"),
    _view_row("d3", None, 0, 2, "2026-08-20T10:00:00Z"),
]


class TestViewReport:
    """Report built from the document_analytics view."""

    def test_overview(self) -> None:
        overview = aggregate_document_analytics(VIEW_ROWS, total_users=4).overview
        assert overview.total_documents == 3
        assert overview.total_users == 4
        assert overview.total_reads == 4
        assert overview.total_downloads == 3
        assert overview.average_reads == 1
        assert overview.average_downloads == 1
        assert overview.total_read == 4
        assert overview.total_not_read == 8
        assert overview.total_downloaded == 3
        assert overview.total_not_downloaded == 9
        assert overview.overall_read_percentage == 33
        assert overview.overall_download_percentage == 25

    def test_document_stats(self) -> None:
        report = aggregate_document_analytics(VIEW_ROWS, total_users=4)
        assert report.document_stats is not None
        assert not report.from_fallback
        d1 = report.document_stats[0]
        assert d1.title == "Doc d1"
        assert (d1.read_count, d1.not_read_count, d1.read_percentage) == (3, 1, 75)
        assert (d1.downloaded_count, d1.not_downloaded_count, d1.download_percentage) == (1, 3, 25)
        assert [s.id for s in report.recent_documents] == ["d1", "d2", "d3"]

    def test_monthly_trend_from_rows(self) -> None:
        trend = aggregate_document_analytics(VIEW_ROWS, total_users=4).monthly_trend
        assert [m.month for m in trend] == ["2026-08", "2026-09"]
        aug, sep = trend
        assert (aug.documents, aug.total_reads, aug.total_downloads) == (1, 0, 2)
        assert (aug.average_read_rate, aug.average_download_rate) == (0, 50)
        assert (sep.documents, sep.total_reads, sep.total_downloads) == (2, 4, 1)
        # 1 / (4 users x 2 documents) = 12.5% rounds half up
        assert (sep.average_read_rate, sep.average_download_rate) == (50, 13)

    def test_no_users_gives_zero_rates(self) -> None:
        report = aggregate_document_analytics(VIEW_ROWS, total_users=0)
        assert report.overview.overall_read_percentage == 0
        assert report.overview.total_not_read == 0
        assert all(s.read_percentage == 0 for s in report.document_stats or [])
        assert all(m.average_read_rate == 0 for m in report.monthly_trend)

    def test_no_documents(self) -> None:
        report = aggregate_document_analytics([], total_users=5)
        assert report.overview.total_documents == 0
        assert report.overview.average_reads == 0
        assert report.overview.overall_download_percentage == 0
        assert report.document_types == []
        assert report.document_stats == []

    def test_recent_limit(self) -> None:
        rows = [_view_row(f"d{i}", "pdf", 0, 0, "2026-09-01T00:00:00Z") for i in range(15)]
        report = aggregate_document_analytics(rows, total_users=1, recent_limit=10)
        assert len(report.recent_documents) == 10
        assert len(report.document_stats or []) == 15


def test_document_types_counts_missing_as_other() -> None:
    types = build_document_types(VIEW_ROWS)
    assert [(t.type, t.count, t.percentage) for t in types] == [
        ("pdf", 2, 67),
        ("other", 1, 33),
    ]


def test_document_types_ties_sorted_by_name() -> None:
    rows = [
        _view_row("a", "xlsx", 0, 0, "2026-09-01T00:00:00Z"),
        _view_row("b", "docx", 0, 0, "2026-09-01T00:00:00Z"),
    ]
    assert [t.type for t in build_document_types(rows)] == ["docx", "xlsx"]


class TestFallbackReport:
    """Report built from raw documents counters."""

    DOCUMENTS = [
        DocumentRecord.model_validate(
            {"id": 1, "name": "Handbook", "reads": 3, "downloads": 1, "created_at": "2026-09-05T10:00:00Z"}
        ),
        DocumentRecord.model_validate(
            {"id": 2, "name": "Policy", "reads": 1, "downloads": None, "created_at": "2026-09-01T10:00:00Z"}
        ),
    ]

    def test_overview(self) -> None:
        overview = aggregate_document_fallback(self.DOCUMENTS, total_users=4).overview
        assert overview.total_documents == 2
        assert overview.total_reads == 4
        assert overview.total_downloads == 1
        assert overview.average_reads == 2
        assert overview.average_downloads == 1
        assert overview.total_not_read == 4
        assert overview.total_not_downloaded == 7
        assert overview.overall_read_percentage == 50
        assert overview.overall_download_percentage == 13

    def test_omits_stats_and_types(self) -> None:
        report = aggregate_document_fallback(self.DOCUMENTS, total_users=4)
        assert report.from_fallback
        assert report.document_stats is None
        assert report.document_types == []
        first = report.recent_documents[0]
        assert first.id == "1"
        assert first.title == "Handbook"
        assert first.read_percentage == 75
        assert first.not_read_count is None
        assert first.downloaded_count is None

    def test_monthly_trend_from_counters(self) -> None:
        trend = aggregate_document_fallback(self.DOCUMENTS, total_users=4).monthly_trend
        assert len(trend) == 1
        assert trend[0].month == "2026-09"
        assert (trend[0].documents, trend[0].total_reads, trend[0].average_read_rate) == (2, 4, 50)
