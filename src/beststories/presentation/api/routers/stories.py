"""Stories router for the best stories ranking."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from beststories.presentation.api.dependencies import BestStoriesQueryDep, SettingsDep
from beststories.presentation.api.schemas import ErrorResponse, StoryResponse

logger = logging.getLogger(__name__)

router = APIRouter()

CountParam = Annotated[
    int | None,
    Query(ge=0, description="Number of stories to return (default: settings)"),
]


@router.get(
    "/best",
    summary="Get the best stories",
    response_model=list[StoryResponse],
    responses={
        200: {"description": "Stories ordered by score, highest first"},
        502: {"model": ErrorResponse, "description": "A listed story vanished"},
        503: {"model": ErrorResponse, "description": "Hacker News unreachable"},
    },
)
async def get_best_stories(
    query: BestStoriesQueryDep,
    settings: SettingsDep,
    n: CountParam = None,
) -> list[StoryResponse]:
    """
    Get the ``n`` best stories from Hacker News, highest score first.

    The full best stories list is cached for a few minutes, so repeated
    calls with any ``n`` are served without hitting Hacker News again.
    Without ``n`` the configured default count is used.
    """
    count = n if n is not None else settings.default_count
    stories = await query.execute(count)
    logger.debug("Returning %d best stories (n=%d)", len(stories), count)
    return [StoryResponse.from_story(story) for story in stories]
