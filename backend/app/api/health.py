"""GET /api/health - Liveness probe (does not contact CWA)."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..schemas.forecast import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health():
    return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())
