"""Application use cases (one class per operation, repositories injected)."""

from portal.application.use_cases.analytics import (
    GetAnnouncementAnalyticsUseCase,
    GetDocumentAnalyticsUseCase,
)
from portal.application.use_cases.announcements import ListAnnouncementsUseCase
from portal.application.use_cases.chat import (
    ListChannelMessagesUseCase,
    ListChannelsUseCase,
)
from portal.application.use_cases.documents import ListDocumentsUseCase
from portal.application.use_cases.roles import GetRoleUseCase, ListRolesUseCase
from portal.application.use_cases.session import ResolveSessionUseCase
from portal.application.use_cases.users import GetUserUseCase, ListUsersUseCase

__all__ = [
    "GetAnnouncementAnalyticsUseCase",
    "GetDocumentAnalyticsUseCase",
    "GetRoleUseCase",
    "GetUserUseCase",
    "ListAnnouncementsUseCase",
    "ListChannelMessagesUseCase",
    "ListChannelsUseCase",
    "ListDocumentsUseCase",
    "ListRolesUseCase",
    "ListUsersUseCase",
    "ResolveSessionUseCase",
]
