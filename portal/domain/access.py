"""Role and department access predicates.

Stateless checks shared by announcements, documents, and chat channels.
Role levels ascend from most privileged (Administrator = 1); every
"can act" check is level <= threshold. Department targeting grants access
when the target list holds the wildcard or the actor's department, and
falls back to the legacy single-department string otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from portal.domain.enums import ALL_DEPARTMENTS, UNKNOWN_ROLE_LEVEL, RoleName

# Minimum privilege for document upload (VP and above).
UPLOAD_DOCUMENT_MAX_LEVEL = 3
# Minimum privilege for deleting any document (Senior VP and above).
DELETE_ANY_DOCUMENT_MAX_LEVEL = 2


class Actor(Protocol):
    """Who is asking: the parts of the request context the predicates read."""

    user_id: str
    department: str | None
    role_name: str | None

    @property
    def effective_level(self) -> int: ...


class DocumentTarget(Protocol):
    """Access-related fields of a document row."""

    uploaded_by: str | None
    department: str | None
    departments: list[str]
    access_level: str | None
    access_levels: list[str]


class ChannelTarget(Protocol):
    """Access-related fields of a chat channel row."""

    required_role: str | None
    department: str | None


def has_role_level(level: int, threshold: int) -> bool:
    """Return True when level is at least as privileged as threshold."""
    return level <= threshold


def role_level_for(role_name: str | None) -> int:
    """Map a built-in role name to its level; unknown names are least privileged."""
    if role_name in RoleName.values():
        return RoleName(role_name).level
    return UNKNOWN_ROLE_LEVEL


def targets_department(
    departments: Sequence[str] | None,
    legacy_department: str | None,
    department: str | None,
) -> bool:
    """Return True when an entity targeting these departments reaches department.

    The departments list is checked first; the legacy single-department
    string still grants access when the list does not.
    """
    if departments and (
        ALL_DEPARTMENTS in departments
        or (department is not None and department in departments)
    ):
        return True
    if legacy_department is None:
        return False
    return legacy_department == ALL_DEPARTMENTS or legacy_department == department


def can_access_document(actor: Actor, document: DocumentTarget) -> bool:
    """Access-level gate for a document.

    Administrators see everything. When the document lists explicit
    access_levels the actor's role name must be one of them; otherwise the
    actor's level must be at or above the document's single access_level.
    """
    if actor.role_name is None:
        return False
    if actor.role_name == RoleName.ADMINISTRATOR.value:
        return True
    if document.access_levels:
        return actor.role_name in document.access_levels
    return has_role_level(actor.effective_level, role_level_for(document.access_level))


def can_view_document(actor: Actor, document: DocumentTarget) -> bool:
    """Access level and department targeting must both allow the actor."""
    if not can_access_document(actor, document):
        return False
    if actor.role_name == RoleName.ADMINISTRATOR.value:
        return True
    return targets_department(
        document.departments, document.department, actor.department
    )


def can_upload_document(actor: Actor) -> bool:
    """VP and above may upload documents."""
    return actor.role_name is not None and has_role_level(
        actor.effective_level, UPLOAD_DOCUMENT_MAX_LEVEL
    )


def can_delete_document(actor: Actor, document: DocumentTarget) -> bool:
    """Senior VP and above delete anything.

    A VP deletes own uploads and documents whose legacy department string is
    the VP's department; the departments list does not widen this.
    """
    if actor.role_name is None:
        return False
    level = actor.effective_level
    if has_role_level(level, DELETE_ANY_DOCUMENT_MAX_LEVEL):
        return True
    if level == RoleName.VP.level:
        if document.uploaded_by is not None and document.uploaded_by == actor.user_id:
            return True
        return actor.department is not None and document.department == actor.department
    return False


def can_access_channel(actor: Actor, channel: ChannelTarget) -> bool:
    """Role must meet the channel's required role; department channels need a match."""
    if actor.role_name is None:
        return False
    if not has_role_level(actor.effective_level, role_level_for(channel.required_role)):
        return False
    if channel.department and channel.department != actor.department:
        return False
    return True
