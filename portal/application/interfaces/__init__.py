"""Application ports implemented by infrastructure."""

from portal.application.interfaces.repositories import (
    IAnnouncementRepository,
    IChatRepository,
    IDocumentRepository,
    IRoleRepository,
    IUserRepository,
)

__all__ = [
    "IAnnouncementRepository",
    "IChatRepository",
    "IDocumentRepository",
    "IRoleRepository",
    "IUserRepository",
]
