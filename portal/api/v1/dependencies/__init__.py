"""Presentation-layer dependency injection (composition root).

Routes depend on these providers only; repositories and use cases are
built here from the process-wide backend client.
"""

from .auth import CurrentContext, get_request_context
from .backend import (
    get_announcement_repo,
    get_backend,
    get_chat_repo,
    get_document_repo,
    get_role_repo,
    get_user_repo,
)
from .use_cases import (
    get_announcement_analytics_use_case,
    get_document_analytics_use_case,
    get_list_announcements_use_case,
    get_list_channels_use_case,
    get_list_documents_use_case,
    get_list_messages_use_case,
    get_list_roles_use_case,
    get_list_users_use_case,
    get_role_use_case,
    get_user_use_case,
)

__all__ = [
    "CurrentContext",
    "get_request_context",
    "get_backend",
    "get_announcement_repo",
    "get_chat_repo",
    "get_document_repo",
    "get_role_repo",
    "get_user_repo",
    "get_announcement_analytics_use_case",
    "get_document_analytics_use_case",
    "get_list_announcements_use_case",
    "get_list_channels_use_case",
    "get_list_documents_use_case",
    "get_list_messages_use_case",
    "get_list_roles_use_case",
    "get_list_users_use_case",
    "get_role_use_case",
    "get_user_use_case",
]
