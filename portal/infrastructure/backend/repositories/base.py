"""Shared helpers for backend-backed repositories."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from portal.infrastructure.backend._rest_client import BackendRESTClient, TableQuery
from portal.infrastructure.exceptions import BackendQueryError
from portal.shared.context import RequestContext

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class BackendRepository:
    """Base for repositories reading tables through BackendRESTClient."""

    def __init__(self, client: BackendRESTClient) -> None:
        self._client = client

    def _query(self, table: str, ctx: RequestContext) -> TableQuery:
        """Start a query that runs as the calling user."""
        return self._client.table(table, access_token=ctx.access_token)

    @staticmethod
    def _validate_rows(
        table: str, rows: list[dict[str, Any]], model: type[RecordT]
    ) -> list[RecordT]:
        """Validate raw rows; a row that does not fit the model fails the whole query."""
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error("Malformed %s row from backend: %s", table, e)
            raise BackendQueryError(
                table, f"malformed row: {e.error_count()} validation error(s)"
            ) from e

    async def _fetch(self, query: TableQuery, model: type[RecordT]) -> list[RecordT]:
        rows = await query.execute()
        return self._validate_rows(query.table, rows, model)
