from beststories.presentation.api.routers.health import router as health_router
from beststories.presentation.api.routers.stories import router as stories_router

__all__ = [
    "health_router",
    "stories_router",
]
