"""Hosted backend integration: REST table client, table names, repositories."""

from portal.infrastructure.backend._rest_client import BackendRESTClient, TableQuery
from portal.infrastructure.backend.client import (
    close_backend,
    get_backend_client,
    init_backend,
)
from portal.infrastructure.exceptions import BackendQueryError

__all__ = [
    "BackendQueryError",
    "BackendRESTClient",
    "TableQuery",
    "close_backend",
    "get_backend_client",
    "init_backend",
]
