"""Domain exceptions for the portal service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all portal application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource, table).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationException(PortalException):
    """Raised when authentication fails (e.g. missing, invalid or expired token)."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PortalException):
    """Raised when the actor's role or department does not grant access."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Insufficient permissions",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'document', 'channel').
            action: Optional action that was attempted (e.g. 'read', 'delete').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Insufficient permissions: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(PortalException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'channel', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class BackendNotConfiguredException(PortalException):
    """Raised when a route needs the hosted backend client before it was initialized."""

    def __init__(self) -> None:
        super().__init__(
            message="Backend client is not initialized (set BACKEND_URL and BACKEND_ANON_KEY).",
            error_code="SERVICE_UNAVAILABLE",
        )


class AnalyticsUnavailableException(PortalException):
    """Raised when any query feeding an analytics report fails.

    Reports are all-or-nothing: the body carries only a generic error string
    so partial results never reach the client.
    """

    def __init__(self, report: str) -> None:
        """Initialize with the report name (e.g. 'announcement', 'document').

        Args:
            report: Which analytics report could not be built.
        """
        super().__init__(
            f"Failed to fetch {report} analytics",
            "ANALYTICS_UNAVAILABLE",
            {"report": report},
        )

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}
