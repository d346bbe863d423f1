"""Tests for backend row validation and normalization."""

import pytest
from pydantic import ValidationError

from portal.application.dtos.records import (
    AnnouncementRecord,
    ChatChannelRecord,
    ChatMessageRecord,
    DocumentAnalyticsRecord,
    DocumentRecord,
    UserRecord,
)


def test_announcement_defaults() -> None:
    row = AnnouncementRecord.model_validate(
        {"id": 7, "title": "Hi", "created_at": "2026-09-01T00:00:00Z", "priority": None, "views": None, "tags": None, "extra_col": 1}
    )
    assert row.id == "7"
    assert row.priority == "medium"
    assert row.pinned is False
    assert row.views == 0
    assert row.tags == []
    assert row.departments == []


def test_user_role_unwrapped_from_list() -> None:
    user = UserRecord.model_validate({"id": "u1", "roles": [{"name": "VP", "level": 3}]})
    assert user.role is not None
    assert user.role.name == "VP"
    assert user.role.level == 3


def test_user_empty_role_list_is_none() -> None:
    assert UserRecord.model_validate({"id": "u1", "role": []}).role is None


def test_document_counters_and_uploader() -> None:
    doc = DocumentRecord.model_validate(
        {
            "id": "d1",
            "name": "Plan",
            "created_at": "2026-09-01T00:00:00Z",
            "reads": None,
            "downloads": 4,
            "access_levels": None,
            "uploaded_by_user": [{"name": "Ada"}],
        }
    )
    assert doc.reads == 0
    assert doc.downloads == 4
    assert doc.access_levels == []
    assert doc.uploaded_by_user is not None
    assert doc.uploaded_by_user.name == "Ada"


def test_document_analytics_title_from_name() -> None:
    row = DocumentAnalyticsRecord.model_validate(
        {"id": "d1", "name": "Plan", "read_count": None, "created_at": "2026-09-01T00:00:00Z"}
    )
    assert row.title == "Plan"
    assert row.read_count == 0
    assert row.download_count == 0


def test_channel_required_role_camel_case() -> None:
    channel = ChatChannelRecord.model_validate({"id": "c1", "name": "leads", "requiredRole": "VP"})
    assert channel.required_role == "VP"


def test_message_author_unwrapped() -> None:
    message = ChatMessageRecord.model_validate(
        {
            "id": "m1",
            "channel_id": "c1",
            "message": "hello",
            "timestamp": "2026-09-01T00:00:00Z",
            "user": {"id": "u1", "name": "Ada", "role": [{"name": "VP"}]},
        }
    )
    assert message.user is not None
    assert message.user.role is not None
    assert message.user.role.name == "VP"


def test_missing_created_at_rejected() -> None:
    with pytest.raises(ValidationError):
        AnnouncementRecord.model_validate({"id": "a1"})
