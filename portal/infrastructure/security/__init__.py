"""Security helpers (token verification)."""

from portal.infrastructure.security.jwt import verify_token

__all__ = ["verify_token"]
