from datetime import datetime, timezone

from fastapi import APIRouter

from profit_api.core.config import settings

router = APIRouter(tags=["monitoring"])

@router.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        Service status and the current UTC time
    """
    return {
        "status": "ok",
        "service": settings.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
