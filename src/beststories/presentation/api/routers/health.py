"""Health check endpoint."""

from fastapi import APIRouter

from beststories import __version__
from beststories.presentation.api.dependencies import CacheDep, SettingsDep
from beststories.presentation.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, cache: CacheDep) -> HealthResponse:
    """Service status plus whether the best stories are currently cached."""
    return HealthResponse(
        status="ok",
        version=__version__,
        cache_warm=cache.contains(settings.cache_key),
    )
