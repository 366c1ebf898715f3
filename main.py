from contextlib import asynccontextmanager

from fastapi import FastAPI

from profit_api.application import create_app
from profit_api.routers import analytics, billing, health, users
from profit_api.core.config import settings
from profit_api.core.logger import logger

# Application lifespan management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management for startup and shutdown events."""
    logger.info(f"Starting {settings.app_name}", extra={"version": settings.version})

    try:
        from profit_api.db.init_db import init_db
        init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}", exc_info=True)

    yield

    logger.info(f"Shutting down {settings.app_name}")

app = create_app(
    users.router,
    analytics.router,
    billing.router,
    health.router,
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["general"])
async def root():
    """
    Root endpoint with API information.

    Returns:
        Basic API information and links
    """
    return {
        "message": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "users": "/users",
            "analytics_summary": "/analytics/summary",
            "analytics_daily": "/analytics/daily",
            "portal_session": "/create-portal-session"
        }
    }
