"""Backend client and repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from portal.domain.exceptions import BackendNotConfiguredException
from portal.infrastructure.backend import BackendRESTClient, get_backend_client
from portal.infrastructure.backend.repositories import (
    AnnouncementRepository,
    ChatRepository,
    DocumentRepository,
    RoleRepository,
    UserRepository,
)


def get_backend() -> BackendRESTClient:
    """Process-wide backend client; 503 when startup has not created it."""
    client = get_backend_client()
    if client is None:
        raise BackendNotConfiguredException()
    return client


BackendDep = Annotated[BackendRESTClient, Depends(get_backend)]


def get_announcement_repo(client: BackendDep) -> AnnouncementRepository:
    return AnnouncementRepository(client)


def get_user_repo(client: BackendDep) -> UserRepository:
    return UserRepository(client)


def get_role_repo(client: BackendDep) -> RoleRepository:
    return RoleRepository(client)


def get_document_repo(client: BackendDep) -> DocumentRepository:
    return DocumentRepository(client)


def get_chat_repo(client: BackendDep) -> ChatRepository:
    return ChatRepository(client)
