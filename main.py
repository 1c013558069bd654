"""
FastAPI application entry point for File Diff Finder.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request

from config import settings

# Configure logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL.upper())
    )
)

logger = structlog.get_logger()

from api.routes import error_response, router
from diffing.change_detector import FileDiffFinder
from services.metrics_tracker import UNMATCHED_ROUTE, metrics_tracker
from storage.cache import InMemoryCache, init_cache
from storage.version_manager import VersionManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(
        "Starting File Diff Finder",
        version=settings.APP_VERSION,
        file_version=app.state.diff_finder.version(),
        file_length=len(app.state.diff_finder.content())
    )

    # Validate configuration
    issues = settings.validate()
    if issues:
        for issue in issues:
            logger.warning(f"Configuration issue: {issue}")

    yield

    # Shutdown
    logger.info("Shutting down File Diff Finder")


def create_app(
    diff_finder: Optional[FileDiffFinder] = None,
    cache: Optional[InMemoryCache] = None,
    diff_timeout: Optional[float] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        diff_finder: Diff finder to serve. Built from settings if not provided.
        cache: Admission cache. A fresh one seeded with the readiness key if not provided.
        diff_timeout: Per-request diff deadline in seconds (default from settings)
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Byte-level delta between a baseline file and submitted updates",
        lifespan=lifespan
    )

    app.state.diff_finder = diff_finder or FileDiffFinder(
        VersionManager(settings.FILE_CONTENT, settings.FILE_VERSION)
    )
    app.state.cache = cache if cache is not None else init_cache()
    app.state.diff_timeout = diff_timeout if diff_timeout is not None else settings.DIFF_TIMEOUT_SECONDS

    @app.middleware("http")
    async def track_duration(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        # Label by route template; unmatched paths share one label
        route = request.scope.get("route")
        path = getattr(route, "path", UNMATCHED_ROUTE)
        metrics_tracker.observe(path, time.perf_counter() - started)
        return response

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.error("Unhandled error", path=request.url.path, error=str(exc))
        return error_response("unexpected internal error", 500)

    app.include_router(router)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
