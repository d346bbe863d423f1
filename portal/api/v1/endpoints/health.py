"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from portal.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status for liveness."""
    return HealthResponse()
