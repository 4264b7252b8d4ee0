"""Health check endpoints."""

import time

from fastapi import APIRouter

router = APIRouter()

# Track service start time
_start_time = time.time()


@router.get(
    "/health",
    summary="Health check",
    description="Basic health check endpoint.",
)
async def health():
    """Basic health check. Not block-logged."""
    return {
        "status": "healthy",
        "service": "user-service",
        "version": "0.1.0",
        "uptime_seconds": int(time.time() - _start_time),
    }
