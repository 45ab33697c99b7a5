"""Health check and reachability endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse, PingResponse

router = APIRouter()


@router.get("/test", response_model=PingResponse)
def get_test() -> PingResponse:
    """Cheap probe the site calls on load to confirm the backend is reachable."""
    return PingResponse(message="Backend is reachable", timestamp=datetime.now(UTC))


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthResponse}},
)
def get_health(response: Response, db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; 503 when the database is unreachable.
    """
    connected = check_db_connected(db)
    if not connected:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        success=connected,
        status="healthy" if connected else "unhealthy",
        environment=settings.APP_ENV,
        database="connected" if connected else "disconnected",
    )
