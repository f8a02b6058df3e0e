"""
FastAPI application factory for the Outcome Mapper API.

create_app() wires Sentry, CORS, the not-found error handler and the
health, courses and areas routers onto a fresh FastAPI instance. Tests
build their own instance with explicit settings and dependency overrides;
uvicorn serves the module-level ``app``.

Usage:
    uvicorn backend.main:app --reload

    from backend.main import create_app
    from backend.settings import Settings

    app = create_app(Settings(environment="test", _env_file=None))
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.exceptions import NotFoundError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the Outcome Mapper API application.

    Args:
        settings: Settings to use; defaults to the cached get_settings()

    Returns:
        FastAPI app with middleware, error handlers and routers attached
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Outcome Mapper API",
        description="Maps content areas to outcomes under course-level filters",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app)
    _include_routers(app)

    logger.info(f"Outcome Mapper API created (environment={settings.environment})")
    return app


def _init_sentry(settings: Settings) -> None:
    """Start Sentry error tracking when a DSN is set."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for outcome-mapper-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the local front-ends plus any origins listed in settings."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_allowed_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate application not-found errors into 404 responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=404, content={"detail": exc.message})


def _include_routers(app: FastAPI) -> None:
    """Attach the health, courses and areas routers."""
    from api.routers import (
        health_router,
        courses_router,
        areas_router,
    )

    app.include_router(health_router)
    app.include_router(courses_router)
    app.include_router(areas_router)


# Served by uvicorn
app = create_app()
