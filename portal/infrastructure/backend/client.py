"""Backend REST client lifecycle.

Initialized at app startup from BACKEND_URL and BACKEND_ANON_KEY and closed
at shutdown. One client (and one connection pool) per process.
"""

import logging

from portal.core.config import get_settings
from portal.infrastructure.backend._rest_client import BackendRESTClient

logger = logging.getLogger(__name__)

_backend_client: BackendRESTClient | None = None


def init_backend() -> BackendRESTClient:
    """Create the process-wide backend client. Idempotent if already initialized."""
    global _backend_client
    if _backend_client is None:
        settings = get_settings()
        _backend_client = BackendRESTClient(
            settings.backend_url,
            settings.backend_anon_key.get_secret_value(),
            timeout=settings.backend_timeout_seconds,
        )
        logger.info("Backend REST client initialized for %s", settings.backend_url)
    return _backend_client


def get_backend_client() -> BackendRESTClient | None:
    """Return the backend client, or None if init_backend() has not run."""
    return _backend_client


async def close_backend() -> None:
    """Close the backend client's HTTP connection pool. Call from app shutdown."""
    global _backend_client
    if _backend_client is not None:
        await _backend_client.aclose()
        _backend_client = None
        logger.info("Backend REST client closed")
