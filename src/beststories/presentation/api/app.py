"""FastAPI application factory.

Creates and configures the FastAPI application with all routers and
exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI

from beststories import __version__
from beststories.application.ports import StorySource
from beststories.infrastructure.cache import TTLCache
from beststories.infrastructure.integration.hacker_news import HackerNewsClient
from beststories.presentation.api.exception_handlers import setup_exception_handlers
from beststories.presentation.api.routers import health_router, stories_router
from beststories_config import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"


def create_story_source(settings: Settings) -> StorySource:
    """Build the Hacker News client from settings."""
    return HackerNewsClient(
        base_url=settings.hn_base_url,
        timeout=settings.hn_timeout,
        attempt_timeout=settings.hn_attempt_timeout,
        max_retries=settings.hn_max_retries,
        retry_delay=settings.hn_retry_delay,
    )


def _log_settings(settings: Settings) -> None:
    logger.info("=" * 60)
    logger.info("%s API v%s", settings.app_name, __version__)
    logger.info("=" * 60)
    logger.info("  Hacker News: %s", settings.hn_base_url)
    logger.info(
        "    Timeout: %.1fs (%.1fs per attempt, %d retries)",
        settings.hn_timeout,
        settings.hn_attempt_timeout,
        settings.hn_max_retries,
    )
    logger.info("  Fetch concurrency: %d", settings.fetch_concurrency)
    logger.info(
        "  Cache: key=%s ttl=%.0fs",
        settings.cache_key,
        settings.cache_ttl_seconds,
    )
    logger.info("  Instance: %s", settings.instance_name)
    logger.info("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the process-wide resources at startup, release them at shutdown.

    Anything already placed on ``app.state`` (e.g. a fake story source in
    tests) is kept as is.
    """
    settings: Settings = app.state.settings
    _log_settings(settings)

    if getattr(app.state, "story_source", None) is None:
        app.state.story_source = create_story_source(settings)
    if getattr(app.state, "cache", None) is None:
        app.state.cache = TTLCache()
    if getattr(app.state, "fetch_semaphore", None) is None:
        app.state.fetch_semaphore = asyncio.Semaphore(settings.fetch_concurrency)

    logger.info("Best stories service ready")
    yield

    logger.info("Shutting down...")
    await app.state.story_source.close()
    app.state.cache.clear()
    logger.info("Story source closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(stories_router, prefix="/stories", tags=["Stories"])
    return v1_router


def create_app(
    settings: Settings | None = None,
    story_source: StorySource | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    story_source
        Optional story source override for testing. Defaults to the
        Hacker News client built during startup.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="The best stories from Hacker News, ranked by score.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.story_source = story_source

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)
    app.include_router(health_router, tags=["Health"])

    return app
