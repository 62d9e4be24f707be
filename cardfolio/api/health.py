"""
CardFolio — Health endpoint
"""
import asyncio
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cardfolio.core.config import get_settings
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.health import HealthResponse

settings = get_settings()
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(db: Database = Depends(get_db)):
    """
    Verifies database connectivity.
    Returns 200 if the database answers, 503 otherwise.
    """
    deps: dict[str, str] = {}
    healthy = True

    try:
        await asyncio.wait_for(db.ping(), timeout=settings.HEALTH_CHECK_TIMEOUT)
        deps["database"] = "ok"
    except Exception as e:
        deps["database"] = f"error: {str(e)[:100]}"
        healthy = False

    response = HealthResponse(
        status="healthy" if healthy else "degraded",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        dependencies=deps,
    )

    return JSONResponse(
        content=response.model_dump(),
        status_code=200 if healthy else 503,
    )
