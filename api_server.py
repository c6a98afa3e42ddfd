"""
Career Match API Server
Recommends career fields from a user's saved likes, hobbies and skills.

Version 1.0.0

Routers:
- /api/v1/matches, /functions/v1/get-matches (matching)
- /api/v1/preferences (profile upsert/read)
- /api/v1/career-fields (catalog browse)
- /api/v1/coaches (coach directory)
- /health, /api/v1/health/deployment
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.career_fields.router import router as career_fields_router
from app.coaches.router import router as coaches_router
from app.config import Settings, load_settings
from app.health.router import router as health_router
from app.matching.errors import MatchingRequestException
from app.matching.router import router as matching_router
from app.preferences.router import router as preferences_router
from app.stores.db import Database

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as "<field>: <reason>", request location dropped."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "header")]
    reason = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {reason}" if loc else reason


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its routers, handlers and DB lifespan."""
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            await app.state.db.close()

    app = FastAPI(
        title="Career Match API",
        description="Career field recommendations from user preferences",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings)

    # ============================================
    # CORS Configuration
    # ============================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    # ============================================
    # Error Handlers
    # ============================================
    @app.exception_handler(MatchingRequestException)
    async def matching_error_handler(request: Request, exc: MatchingRequestException):
        return JSONResponse(status_code=exc.http_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # ============================================
    # Routers
    # ============================================
    app.include_router(health_router)
    app.include_router(matching_router)
    app.include_router(preferences_router)
    app.include_router(career_fields_router)
    app.include_router(coaches_router)

    return app


app = create_app()
