"""
Deployment Health Check Endpoint
================================
Returns status of the deployed Career Match API.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_database, get_settings
from app.matching import __version__ as matching_version
from app.stores.db import Database
from app.stores.errors import DB_ERRORS, StoreError

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Liveness check. Touches no collaborators."""
    return {
        "status": "healthy",
        "service": "career-match-api",
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }


@router.get("/api/v1/health/deployment")
async def deployment_health(
    settings: Settings = Depends(get_settings),
    db: Database = Depends(get_database),
):
    """
    Deployment health check.

    Verifies database connectivity and that the identity service is configured.
    """
    status = {
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "matching_engine": matching_version,
        "components": {},
    }

    if not settings.database_configured:
        status["components"]["database"] = {"status": "error", "error": "DATABASE_URL not configured"}
    else:
        try:
            async with db.connection() as conn:
                await conn.fetchval("SELECT 1")
            status["components"]["database"] = {"status": "healthy"}
        except StoreError as e:
            status["components"]["database"] = {"status": "error", "error": e.message}
        except DB_ERRORS as e:
            status["components"]["database"] = {"status": "error", "error": str(e)}

    if settings.identity_configured:
        status["components"]["identity"] = {"status": "healthy"}
    else:
        status["components"]["identity"] = {"status": "error", "error": "Not configured"}

    healthy = all(c["status"] == "healthy" for c in status["components"].values())
    status["status"] = "healthy" if healthy else "degraded"
    return status
