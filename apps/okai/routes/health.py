from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime, timezone

from apps.okai.db import get_okai_session
from apps.okai.schemas.performance import PerformanceSnapshot
from apps.okai.services import PerformanceService, get_performance_service

router = APIRouter()

@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_okai_session)):
    """Health check endpoint to verify the API and its database"""
    health_status = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "okaigpt-api",
        "checks": {}
    }

    try:
        await db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {"status": "healthy"}
    except Exception as e:
        health_status["checks"]["database"] = {"status": "error", "error": str(e)}
        health_status["status"] = "unhealthy"
        raise HTTPException(status_code=503, detail=health_status)

    return health_status

@router.get("/performance", response_model=PerformanceSnapshot)
async def get_performance_snapshot(
    performance_service: PerformanceService = Depends(get_performance_service)
):
    """Simulated system metrics for the performance dashboard"""
    return performance_service.snapshot()
