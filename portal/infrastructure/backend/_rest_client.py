"""Thin REST client for the hosted backend's table API (PostgREST dialect).

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Each query is sent with the project API key and, when given, the caller's
access token, so the backend evaluates row-level security as that user.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from portal.infrastructure.exceptions import BackendQueryError

logger = logging.getLogger(__name__)

_REST_PATH = "/rest/v1"


def _error_from_response(table: str, resp: httpx.Response) -> BackendQueryError:
    """Build BackendQueryError from a PostgREST error body ({code, message, details, hint})."""
    try:
        body = resp.json()
    except (json.JSONDecodeError, ValueError):
        body = {}
    if not isinstance(body, dict):
        body = {}
    return BackendQueryError(
        table,
        body.get("message") or resp.reason_phrase or f"HTTP {resp.status_code}",
        code=body.get("code"),
        hint=body.get("hint"),
        status_code=resp.status_code,
    )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


class TableQuery:
    """Fluent read query for one table or view; runs via GET /rest/v1/<table>."""

    def __init__(
        self,
        client: "BackendRESTClient",
        table: str,
        access_token: str | None = None,
    ) -> None:
        self._client = client
        self._table = table
        self._access_token = access_token
        self._select = "*"
        self._filters: list[tuple[str, str]] = []
        self._order: list[str] = []
        self._limit: int | None = None

    @property
    def table(self) -> str:
        return self._table

    def select(self, columns: str) -> "TableQuery":
        """Columns and embedded relations, e.g. 'id, name, role:roles(name)'."""
        self._select = " ".join(columns.split())
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"eq.{_format_value(value)}"))
        return self

    def gte(self, column: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"gte.{_format_value(value)}"))
        return self

    def order(self, column: str, *, ascending: bool = True) -> "TableQuery":
        self._order.append(f"{column}.{'asc' if ascending else 'desc'}")
        return self

    def limit(self, n: int) -> "TableQuery":
        self._limit = n
        return self

    def params(self) -> list[tuple[str, str]]:
        """Query-string parameters for this query (select, filters, order, limit)."""
        params: list[tuple[str, str]] = [("select", self._select)]
        params.extend(self._filters)
        if self._order:
            params.append(("order", ",".join(self._order)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        return params

    async def execute(self) -> list[dict[str, Any]]:
        """Run the query and return the rows as dicts.

        Raises:
            BackendQueryError: On an error status, a transport failure, or a
                body that is not a JSON array.
        """
        return await self._client.fetch_rows(
            self._table, self.params(), access_token=self._access_token
        )


class BackendRESTClient:
    """Lightweight async client for the backend's REST table API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/") + _REST_PATH
        self._api_key = api_key
        self._http = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        )
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    def table(self, name: str, access_token: str | None = None) -> TableQuery:
        """Start a query on a table or view, optionally as the given user."""
        return TableQuery(self, name, access_token=access_token)

    def _headers(self, access_token: str | None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
            "Accept": "application/json",
        }

    async def fetch_rows(
        self,
        table: str,
        params: list[tuple[str, str]],
        *,
        access_token: str | None = None,
    ) -> list[dict[str, Any]]:
        """GET rows from table with the given query parameters."""
        url = f"{self._base_url}/{table}"
        try:
            resp = await self._http.get(
                url, params=params, headers=self._headers(access_token)
            )
        except httpx.HTTPError as e:
            raise BackendQueryError(table, f"transport error: {e!s}") from e
        if resp.status_code >= 400:
            raise _error_from_response(table, resp)
        try:
            rows = resp.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise BackendQueryError(
                table, "response is not valid JSON", status_code=resp.status_code
            ) from e
        if not isinstance(rows, list):
            raise BackendQueryError(
                table, "expected a JSON array of rows", status_code=resp.status_code
            )
        logger.debug("Fetched %d rows from %s", len(rows), table)
        return rows
