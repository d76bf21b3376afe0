"""FastAPI dependency injection for the Best Stories API.

Long-lived resources (story source, cache, fetch semaphore) are created
once in the application lifespan and kept on ``app.state``. Dependencies
here only hand them out, so tests can swap any of them before the app
starts.
"""

import asyncio
from typing import Annotated

from fastapi import Depends, Request

from beststories.application.ports import StorySource
from beststories.application.queries import GetBestStoriesQuery
from beststories.infrastructure.cache import TTLCache
from beststories_config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_story_source(request: Request) -> StorySource:
    return request.app.state.story_source


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def get_fetch_semaphore(request: Request) -> asyncio.Semaphore:
    return request.app.state.fetch_semaphore


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
StorySourceDep = Annotated[StorySource, Depends(get_story_source)]
CacheDep = Annotated[TTLCache, Depends(get_cache)]
FetchSemaphoreDep = Annotated[asyncio.Semaphore, Depends(get_fetch_semaphore)]


def get_best_stories_query(
    settings: SettingsDep,
    story_source: StorySourceDep,
    cache: CacheDep,
    semaphore: FetchSemaphoreDep,
) -> GetBestStoriesQuery:
    """Build the query around the process-wide cache and semaphore."""
    return GetBestStoriesQuery.from_settings(
        settings=settings,
        story_source=story_source,
        cache=cache,
        semaphore=semaphore,
    )


BestStoriesQueryDep = Annotated[GetBestStoriesQuery, Depends(get_best_stories_query)]
