"""Health check endpoints for debugging and monitoring."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.api.core.dependencies import AsyncSessionDep
from src.modules.health.service import HealthService, OverallHealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=OverallHealthStatus)
async def health_check(db: AsyncSessionDep):
    """Health check for the database connection."""
    health = await HealthService(db).run_all_checks()
    if health.status != "healthy":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": health.status,
                "services": {
                    name: vars(result) for name, result in health.services.items()
                },
                "timestamp": health.timestamp,
            },
        )
    return health


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "messages-api"}
