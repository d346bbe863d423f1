"""API tests for authenticated list endpoints and role/department gating."""

from httpx import AsyncClient

from conftest import FakeBackend, make_token
from portal.application.dtos.records import (
    AnnouncementRecord,
    ChatChannelRecord,
    ChatMessageRecord,
    DocumentRecord,
    RoleRecord,
)


class TestAuthentication:
    async def test_missing_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth/session")
        assert response.status_code == 401
        assert response.json()["error"] == "AUTHENTICATION_ERROR"

    async def test_invalid_token(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/auth/session", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    async def test_token_for_unknown_user(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/auth/session", headers={"Authorization": f"Bearer {make_token('ghost')}"}
        )
        assert response.status_code == 401

    async def test_session(self, client: AsyncClient, vp_headers: dict[str, str]) -> None:
        response = await client.get("/api/v1/auth/session", headers=vp_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == "u-vp"
        assert data["role_name"] == "VP"
        assert data["role_level"] == 3
        assert data["department"] == "Engineering"
        assert data["is_administrator"] is False
        assert "access_token" not in data


async def test_list_announcements_filters(
    client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
) -> None:
    backend.announcements = [
        AnnouncementRecord.model_validate(
            {"id": "a1", "title": "Quota", "user_id": "u-vp", "departments": ["Sales"], "priority": "high", "created_at": "2026-09-02T00:00:00Z"}
        ),
        AnnouncementRecord.model_validate(
            {"id": "a2", "title": "Deploy", "author": "ops@example.com", "departments": ["Engineering"], "created_at": "2026-09-01T00:00:00Z"}
        ),
    ]
    response = await client.get(
        "/api/v1/announcements", params={"department": "Sales"}, headers=employee_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert [a["id"] for a in data] == ["a1"]
    assert data[0]["authorName"] == "Victor VP"
    assert data[0]["authorAvatar"] is None
    assert data[0]["priority"] == "high"

    response = await client.get("/api/v1/announcements", headers=employee_headers)
    assert [a["authorName"] for a in response.json()] == ["Victor VP", "ops@example.com"]


async def test_list_documents_visibility_and_can_delete(
    client: AsyncClient, backend: FakeBackend, vp_headers: dict[str, str]
) -> None:
    backend.documents = [
        DocumentRecord.model_validate(
            {"id": "d1", "name": "Eng plan", "access_level": "VP", "departments": ["Engineering"], "department": "Engineering", "uploaded_by_user": {"name": "Ada Admin"}, "created_at": "2026-09-03T00:00:00Z"}
        ),
        DocumentRecord.model_validate(
            {"id": "d2", "name": "Company memo", "access_level": "Employee", "departments": ["All"], "created_at": "2026-09-02T00:00:00Z"}
        ),
        DocumentRecord.model_validate(
            {"id": "d3", "name": "Board minutes", "access_level": "Senior VP", "departments": ["All"], "created_at": "2026-09-01T00:00:00Z"}
        ),
        DocumentRecord.model_validate(
            {"id": "d4", "name": "Sales deck", "access_level": "Employee", "departments": ["Sales"], "created_at": "2026-08-01T00:00:00Z"}
        ),
    ]
    response = await client.get("/api/v1/documents", headers=vp_headers)
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data] == ["d1", "d2"]
    assert data[0]["canDelete"] is True
    assert data[0]["uploaded_by_user"] == {"name": "Ada Admin"}
    # "All" is not the VP's own department.
    assert data[1]["canDelete"] is False


async def test_admin_sees_every_document(
    client: AsyncClient, backend: FakeBackend, admin_headers: dict[str, str]
) -> None:
    backend.documents = [
        DocumentRecord.model_validate(
            {"id": "d1", "name": "Sales deck", "access_levels": ["Employee"], "departments": ["Sales"], "created_at": "2026-08-01T00:00:00Z"}
        )
    ]
    data = (await client.get("/api/v1/documents", headers=admin_headers)).json()
    assert [d["id"] for d in data] == ["d1"]
    assert data[0]["canDelete"] is True


class TestChat:
    def _seed(self, backend: FakeBackend) -> None:
        backend.channels = [
            ChatChannelRecord(id="c-general", name="general", required_role="Employee"),
            ChatChannelRecord(id="c-leads", name="leads", required_role="VP"),
            ChatChannelRecord(id="c-sales", name="sales", required_role="Employee", department="Sales"),
        ]
        backend.messages = [
            ChatMessageRecord.model_validate(
                {"id": "m1", "channel_id": "c-leads", "user_id": "u-vp", "message": "hi", "timestamp": "2026-09-01T10:00:00Z", "user": {"id": "u-vp", "name": "Victor VP", "role": {"name": "VP"}}}
            )
        ]

    async def test_channels_for_employee(
        self, client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
    ) -> None:
        self._seed(backend)
        response = await client.get("/api/v1/chat/channels", headers=employee_headers)
        assert [c["id"] for c in response.json()] == ["c-general", "c-sales"]

    async def test_channels_for_vp(
        self, client: AsyncClient, backend: FakeBackend, vp_headers: dict[str, str]
    ) -> None:
        self._seed(backend)
        response = await client.get("/api/v1/chat/channels", headers=vp_headers)
        assert [c["id"] for c in response.json()] == ["c-general", "c-leads"]

    async def test_messages(
        self, client: AsyncClient, backend: FakeBackend, vp_headers: dict[str, str]
    ) -> None:
        self._seed(backend)
        response = await client.get("/api/v1/chat/c-leads/messages", headers=vp_headers)
        assert response.status_code == 200
        message = response.json()[0]
        assert message["message"] == "hi"
        assert message["user"]["role"] == {"name": "VP"}

    async def test_messages_forbidden(
        self, client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
    ) -> None:
        self._seed(backend)
        response = await client.get("/api/v1/chat/c-leads/messages", headers=employee_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "PERMISSION_DENIED"

    async def test_messages_unknown_channel(
        self, client: AsyncClient, backend: FakeBackend, vp_headers: dict[str, str]
    ) -> None:
        self._seed(backend)
        response = await client.get("/api/v1/chat/nope/messages", headers=vp_headers)
        assert response.status_code == 404


async def test_roles_ordered_by_level(
    client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
) -> None:
    backend.roles = [
        RoleRecord(id="r5", name="Employee", level=5),
        RoleRecord(id="r1", name="Administrator", level=1),
    ]
    response = await client.get("/api/v1/roles", headers=employee_headers)
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Administrator", "Employee"]


async def test_get_role_by_id(
    client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
) -> None:
    backend.roles = [RoleRecord(id="r3", name="VP", level=3, description="Vice president")]
    response = await client.get("/api/v1/roles/r3", headers=employee_headers)
    assert response.status_code == 200
    assert response.json() == {"id": "r3", "name": "VP", "level": 3, "description": "Vice president"}

    response = await client.get("/api/v1/roles/r404", headers=employee_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


class TestUsers:
    async def test_list_ordered_by_name_with_role(
        self, client: AsyncClient, employee_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/users", headers=employee_headers)
        assert response.status_code == 200
        data = response.json()
        assert [u["name"] for u in data] == ["Ada Admin", "Erin Employee", "Victor VP"]
        assert data[2]["role"]["name"] == "VP"
        assert data[2]["role"]["level"] == 3

    async def test_role_and_department_filters(
        self, client: AsyncClient, employee_headers: dict[str, str]
    ) -> None:
        response = await client.get(
            "/api/v1/users", params={"role": "VP"}, headers=employee_headers
        )
        assert [u["id"] for u in response.json()] == ["u-vp"]

        response = await client.get(
            "/api/v1/users", params={"department": "Sales"}, headers=employee_headers
        )
        assert [u["id"] for u in response.json()] == ["u-emp"]

        response = await client.get(
            "/api/v1/users",
            params={"role": "VP", "department": "Sales"},
            headers=employee_headers,
        )
        assert response.json() == []

    async def test_get_user(
        self, client: AsyncClient, employee_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/users/u-admin", headers=employee_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "u-admin@example.com"
        assert response.json()["role"]["name"] == "Administrator"

    async def test_unknown_user_is_404(
        self, client: AsyncClient, employee_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/users/u-missing", headers=employee_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "RESOURCE_NOT_FOUND"

    async def test_requires_token(self, client: AsyncClient) -> None:
        assert (await client.get("/api/v1/users")).status_code == 401
        assert (await client.get("/api/v1/users/u-admin")).status_code == 401


async def test_backend_error_is_502(
    client: AsyncClient, backend: FakeBackend, employee_headers: dict[str, str]
) -> None:
    backend.failing.add("list_by_level")
    response = await client.get("/api/v1/roles", headers=employee_headers)
    assert response.status_code == 502
    assert response.json()["error"] == "BACKEND_QUERY_ERROR"
