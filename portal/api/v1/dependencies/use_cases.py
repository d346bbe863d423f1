"""Use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from portal.application.interfaces.repositories import (
    IAnnouncementRepository,
    IChatRepository,
    IDocumentRepository,
    IRoleRepository,
    IUserRepository,
)
from portal.application.use_cases import (
    GetAnnouncementAnalyticsUseCase,
    GetDocumentAnalyticsUseCase,
    GetRoleUseCase,
    GetUserUseCase,
    ListAnnouncementsUseCase,
    ListChannelMessagesUseCase,
    ListChannelsUseCase,
    ListDocumentsUseCase,
    ListRolesUseCase,
    ListUsersUseCase,
)
from portal.core.config import get_settings

from .backend import (
    get_announcement_repo,
    get_chat_repo,
    get_document_repo,
    get_role_repo,
    get_user_repo,
)


def get_announcement_analytics_use_case(
    announcement_repo: Annotated[IAnnouncementRepository, Depends(get_announcement_repo)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> GetAnnouncementAnalyticsUseCase:
    settings = get_settings()
    return GetAnnouncementAnalyticsUseCase(
        announcement_repo,
        user_repo,
        window_months=settings.analytics_window_months,
        recent_limit=settings.analytics_recent_limit,
    )


def get_document_analytics_use_case(
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> GetDocumentAnalyticsUseCase:
    return GetDocumentAnalyticsUseCase(
        document_repo,
        user_repo,
        recent_limit=get_settings().analytics_recent_limit,
    )


def get_list_announcements_use_case(
    announcement_repo: Annotated[IAnnouncementRepository, Depends(get_announcement_repo)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> ListAnnouncementsUseCase:
    return ListAnnouncementsUseCase(announcement_repo, user_repo)


def get_list_documents_use_case(
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
) -> ListDocumentsUseCase:
    return ListDocumentsUseCase(document_repo)


def get_list_channels_use_case(
    chat_repo: Annotated[IChatRepository, Depends(get_chat_repo)],
) -> ListChannelsUseCase:
    return ListChannelsUseCase(chat_repo)


def get_list_messages_use_case(
    chat_repo: Annotated[IChatRepository, Depends(get_chat_repo)],
) -> ListChannelMessagesUseCase:
    return ListChannelMessagesUseCase(chat_repo)


def get_list_roles_use_case(
    role_repo: Annotated[IRoleRepository, Depends(get_role_repo)],
) -> ListRolesUseCase:
    return ListRolesUseCase(role_repo)


def get_role_use_case(
    role_repo: Annotated[IRoleRepository, Depends(get_role_repo)],
) -> GetRoleUseCase:
    return GetRoleUseCase(role_repo)


def get_list_users_use_case(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> ListUsersUseCase:
    return ListUsersUseCase(user_repo)


def get_user_use_case(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> GetUserUseCase:
    return GetUserUseCase(user_repo)
