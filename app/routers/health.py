# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from app.dependencies import MongoDep, RedisDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ChecksResponse(BaseModel):
    """Individual service checks."""
    cache: str
    database: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(redis: RedisDep, mongo: MongoDep):
    """
    Readiness check endpoint.

    Pings Redis and MongoDB. Always 200; `status` is "degraded" when either
    dependency fails.
    """
    checks = ChecksResponse(cache="unknown", database="unknown")

    try:
        await redis.ping()
        checks.cache = "healthy"
    except RedisError as e:
        checks.cache = f"unhealthy: {str(e)[:50]}"

    try:
        await mongo.admin.command("ping")
        checks.database = "healthy"
    except PyMongoError as e:
        checks.database = f"unhealthy: {str(e)[:50]}"

    all_healthy = checks.cache == "healthy" and checks.database == "healthy"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(status="alive", timestamp=_now())
