"""Infrastructure exceptions for hosted backend operations.

Backend errors extend PortalException so presentation can map them
to HTTP responses consistently.
"""

from portal.domain.exceptions import PortalException


class BackendQueryError(PortalException):
    """A table query failed: HTTP error status, transport error, or malformed rows.

    Attributes:
        table: Table or view that was queried.
        code: Backend error code (e.g. '42P01' for a missing relation), if any.
        hint: Backend hint, if any.
        status_code: HTTP status, or None for transport and validation errors.
    """

    def __init__(
        self,
        table: str,
        message: str,
        *,
        code: str | None = None,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.table = table
        self.code = code
        self.hint = hint
        self.status_code = status_code
        super().__init__(
            f"{table}: {message}",
            "BACKEND_QUERY_ERROR",
            {"table": table, "code": code},
        )
