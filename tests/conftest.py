"""Pytest configuration and fixtures for the portal reporting service.

Backend settings are set before portal.main is imported so get_settings()
validates. API tests never reach a real backend: repository dependencies
are overridden with the in-memory fakes below.
"""

import os
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

os.environ.setdefault("BACKEND_URL", "http://backend.test")
os.environ.setdefault("BACKEND_ANON_KEY", "test-anon-key")
os.environ.setdefault("BACKEND_JWT_SECRET", "test-jwt-secret")
os.environ["TELEMETRY_ENABLED"] = "false"

from portal.api.v1.dependencies import (  # noqa: E402
    get_announcement_repo,
    get_chat_repo,
    get_document_repo,
    get_role_repo,
    get_user_repo,
)
from portal.application.dtos.records import (  # noqa: E402
    AnnouncementReadRecord,
    AnnouncementRecord,
    ChatChannelRecord,
    ChatMessageRecord,
    DocumentAnalyticsRecord,
    DocumentRecord,
    RoleRecord,
    UserRecord,
)
from portal.core.config import get_settings  # noqa: E402
from portal.infrastructure.exceptions import BackendQueryError  # noqa: E402
from portal.main import app  # noqa: E402

get_settings.cache_clear()


class FakeBackend:
    """In-memory rows shared by the fake repositories.

    Put a method name in `failing` to make that query raise BackendQueryError.
    """

    def __init__(self) -> None:
        self.users: list[UserRecord] = []
        self.roles: list[RoleRecord] = []
        self.announcements: list[AnnouncementRecord] = []
        self.reads: list[AnnouncementReadRecord] = []
        self.documents: list[DocumentRecord] = []
        self.document_analytics: list[DocumentAnalyticsRecord] = []
        self.channels: list[ChatChannelRecord] = []
        self.messages: list[ChatMessageRecord] = []
        self.failing: set[str] = set()

    def check(self, operation: str, table: str) -> None:
        if operation in self.failing:
            raise BackendQueryError(table, "relation does not exist", code="42P01")


class FakeAnnouncementRepository:
    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend

    async def list_created_since(self, ctx, since):
        self.backend.check("list_created_since", "announcements")
        rows = [a for a in self.backend.announcements if a.created_at >= since]
        return sorted(rows, key=lambda a: a.created_at, reverse=True)

    async def list_all(self, ctx):
        self.backend.check("list_all", "announcements")
        return sorted(self.backend.announcements, key=lambda a: a.created_at, reverse=True)

    async def list_reads(self, ctx):
        self.backend.check("list_reads", "announcement_reads")
        return list(self.backend.reads)


class FakeUserRepository:
    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend

    async def list_with_roles(self, ctx):
        self.backend.check("list_with_roles", "users")
        return list(self.backend.users)

    async def list_filtered(self, ctx, *, role=None, department=None):
        self.backend.check("list_filtered", "users")
        rows = [
            u
            for u in self.backend.users
            if (not role or (u.role is not None and u.role.name == role))
            and (not department or u.department == department)
        ]
        return sorted(rows, key=lambda u: u.name or "")

    async def get_by_id(self, ctx, user_id):
        self.backend.check("get_by_id", "users")
        return next((u for u in self.backend.users if u.id == user_id), None)

    async def get_with_role(self, user_id, access_token):
        self.backend.check("get_with_role", "users")
        return next((u for u in self.backend.users if u.id == user_id), None)


class FakeRoleRepository:
    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend

    async def list_by_level(self, ctx):
        self.backend.check("list_by_level", "roles")
        return sorted(self.backend.roles, key=lambda r: r.level or 0)

    async def get_by_id(self, ctx, role_id):
        self.backend.check("get_role", "roles")
        return next((r for r in self.backend.roles if r.id == role_id), None)


class FakeDocumentRepository:
    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend

    async def list_analytics(self, ctx):
        self.backend.check("list_analytics", "document_analytics")
        return list(self.backend.document_analytics)

    async def list_counters(self, ctx):
        self.backend.check("list_counters", "documents")
        return list(self.backend.documents)

    async def list_with_uploader(self, ctx):
        self.backend.check("list_with_uploader", "documents")
        return list(self.backend.documents)


class FakeChatRepository:
    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend

    async def list_channels(self, ctx):
        self.backend.check("list_channels", "chat_channels")
        return sorted(self.backend.channels, key=lambda c: c.name)

    async def get_channel(self, ctx, channel_id):
        self.backend.check("get_channel", "chat_channels")
        return next((c for c in self.backend.channels if c.id == channel_id), None)

    async def list_messages(self, ctx, channel_id):
        self.backend.check("list_messages", "chat_messages")
        return [m for m in self.backend.messages if m.channel_id == channel_id]


def make_user(
    user_id: str,
    role: str | None,
    level: int | None,
    department: str | None = "Engineering",
    name: str | None = None,
) -> UserRecord:
    """User row with an embedded role, as the users query returns it."""
    return UserRecord.model_validate(
        {
            "id": user_id,
            "name": name or user_id,
            "email": f"{user_id}@example.com",
            "department": department,
            "role": {"name": role, "level": level} if role else None,
        }
    )


def make_token(sub: str, **claims: Any) -> str:
    """Access token signed like the hosted auth service signs them."""
    settings = get_settings()
    payload = {
        "sub": sub,
        "aud": settings.jwt_audience,
        "exp": datetime.now(UTC) + timedelta(minutes=5),
        **claims,
    }
    return jwt.encode(
        payload,
        settings.backend_jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


@pytest.fixture
def backend() -> FakeBackend:
    """Fake backend with an administrator, a VP and an employee."""
    fake = FakeBackend()
    fake.users = [
        make_user("u-admin", "Administrator", 1, "Executive", name="Ada Admin"),
        make_user("u-vp", "VP", 3, "Engineering", name="Victor VP"),
        make_user("u-emp", "Employee", 5, "Sales", name="Erin Employee"),
    ]
    return fake


@pytest.fixture
async def client(backend: FakeBackend) -> AsyncClient:
    """Async HTTP client against the app with repositories backed by `backend`."""
    app.dependency_overrides[get_announcement_repo] = lambda: FakeAnnouncementRepository(backend)
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository(backend)
    app.dependency_overrides[get_role_repo] = lambda: FakeRoleRepository(backend)
    app.dependency_overrides[get_document_repo] = lambda: FakeDocumentRepository(backend)
    app.dependency_overrides[get_chat_repo] = lambda: FakeChatRepository(backend)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def auth_for(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_for("u-admin")


@pytest.fixture
def vp_headers() -> dict[str, str]:
    return auth_for("u-vp")


@pytest.fixture
def employee_headers() -> dict[str, str]:
    return auth_for("u-emp")
