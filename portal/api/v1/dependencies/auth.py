"""Authentication dependencies: bearer token to RequestContext."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portal.application.interfaces.repositories import IUserRepository
from portal.application.use_cases.session import ResolveSessionUseCase
from portal.domain.exceptions import AuthenticationException
from portal.infrastructure.security.jwt import verify_token
from portal.shared.context import RequestContext

from .backend import get_user_repo

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_request_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> RequestContext:
    """Verify the bearer token and load the caller's user row and role.

    Raises:
        AuthenticationException: Missing, invalid or expired token, or no user row.
    """
    if credentials is None:
        raise AuthenticationException()
    try:
        claims = verify_token(credentials.credentials)
    except ValueError as e:
        logger.info("Rejected access token: %s", e)
        raise AuthenticationException("Invalid or expired token") from e
    return await ResolveSessionUseCase(user_repo).execute(
        claims,
        credentials.credentials,
        request_id=getattr(request.state, "request_id", None),
    )


CurrentContext = Annotated[RequestContext, Depends(get_request_context)]
