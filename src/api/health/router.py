"""Health check endpoints for monitoring."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.api.core.dependencies import AsyncSessionDep
from src.modules.health.service import HealthService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(db: AsyncSessionDep):
    """Database connectivity; 503 when unhealthy."""
    health = await HealthService(db).run_all_checks()
    return JSONResponse(
        status_code=200 if health.status == "healthy" else 503,
        content={
            "status": health.status,
            "timestamp": health.timestamp,
            "services": {
                name: {
                    "status": result.status,
                    "connected": result.connected,
                    "details": result.details,
                    "error": result.error,
                }
                for name, result in health.services.items()
            },
        },
    )


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "donorhub-api"}
