"""Auth API: the current session."""

from fastapi import APIRouter

from portal.api.v1.dependencies import CurrentContext
from portal.schemas.auth import SessionResponse

router = APIRouter()


@router.get("/session", response_model=SessionResponse)
async def get_session(ctx: CurrentContext) -> SessionResponse:
    """Return the authenticated caller (401 without a valid bearer token)."""
    return SessionResponse.model_validate(ctx)
