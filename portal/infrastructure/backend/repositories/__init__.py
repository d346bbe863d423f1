"""Backend-backed repositories."""

from portal.infrastructure.backend.repositories.announcement_repo import (
    AnnouncementRepository,
)
from portal.infrastructure.backend.repositories.chat_repo import ChatRepository
from portal.infrastructure.backend.repositories.document_repo import DocumentRepository
from portal.infrastructure.backend.repositories.user_repo import (
    RoleRepository,
    UserRepository,
)

__all__ = [
    "AnnouncementRepository",
    "ChatRepository",
    "DocumentRepository",
    "RoleRepository",
    "UserRepository",
]
