"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from audit_trail.core.config import get_settings
from audit_trail.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)
