"""Get best stories query - ranked top-N slice of the best stories list."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from beststories.domain.shared import ValidationError
from beststories.domain.stories import RawStory, Story, rank_stories

if TYPE_CHECKING:
    from beststories.application.ports import StorySource
    from beststories.infrastructure.cache import TTLCache
    from beststories_config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "best_stories"
DEFAULT_CACHE_TTL_SECONDS = 600.0


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class GetBestStoriesQuery:
    """Return the highest scoring best stories.

    The full set of raw stories is cached under a single key, independent of
    the requested count, so any slice size is served from the same entry
    until it expires. Detail fetches share ``semaphore`` with every other
    query instance built from the same semaphore, which bounds the number of
    requests in flight to the remote source for the whole process.
    """

    def __init__(
        self,
        story_source: StorySource,
        cache: TTLCache,
        semaphore: asyncio.Semaphore,
        instance_name: str,
        cache_key: str = DEFAULT_CACHE_KEY,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        now: Callable[[], datetime] = _utcnow,
    ):
        self._source = story_source
        self._cache = cache
        self._semaphore = semaphore
        self._instance_name = instance_name
        self._cache_key = cache_key
        self._cache_ttl = cache_ttl
        self._now = now

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        story_source: StorySource,
        cache: TTLCache,
        semaphore: asyncio.Semaphore,
    ) -> GetBestStoriesQuery:
        return cls(
            story_source=story_source,
            cache=cache,
            semaphore=semaphore,
            instance_name=settings.instance_name,
            cache_key=settings.cache_key,
            cache_ttl=settings.cache_ttl_seconds,
        )

    async def execute(self, count: int) -> list[Story]:
        """Return up to ``count`` stories ordered by score, best first.

        Raises
        ------
        ValidationError
            If ``count`` is negative.
        StorySourceError, StoryNotFoundError
            Propagated unchanged from the story source. Nothing is cached
            when any fetch fails.
        """
        if count < 0:
            msg = f"count must be a non-negative integer, got {count}"
            raise ValidationError(msg, details={"count": count})

        raw_stories: tuple[RawStory, ...] | None = self._cache.get(self._cache_key)
        if raw_stories is not None:
            logger.info(
                "Cache hit. Returning top %d of %d stories.",
                count,
                len(raw_stories),
            )
        else:
            raw_stories = await self._fetch_best_stories()

        return self._to_ranked_stories(raw_stories, count)

    async def _fetch_best_stories(self) -> tuple[RawStory, ...]:
        logger.info("Searching best story ids")
        story_ids = await self._source.list_best_ids()

        if not story_ids:
            logger.warning("No stories found.")
            return ()

        logger.info("Fetching details for %d stories", len(story_ids))
        raw_stories = await self._fetch_details(story_ids)

        logger.info("Caching %d stories for %.0fs", len(raw_stories), self._cache_ttl)
        self._cache.set(self._cache_key, raw_stories, self._cache_ttl)
        return raw_stories

    async def _fetch_details(self, story_ids: Iterable[int]) -> tuple[RawStory, ...]:
        """Fetch every story, failing as soon as one fetch fails.

        Results are collected positionally, so the returned tuple follows the
        order of ``story_ids`` whatever order the fetches complete in.
        """
        tasks = [
            asyncio.ensure_future(self._fetch_one(story_id)) for story_id in story_ids
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # First failure or cancellation: stop the remaining fetches and
            # wait until they have given back their slots.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return tuple(results)

    async def _fetch_one(self, story_id: int) -> RawStory:
        async with self._semaphore:
            return await self._source.get_story(story_id)

    def _to_ranked_stories(
        self,
        raw_stories: Iterable[RawStory],
        count: int,
    ) -> list[Story]:
        created_at = self._now()
        stories = (
            Story.from_raw(raw, created_on=self._instance_name, created_at=created_at)
            for raw in raw_stories
        )
        return rank_stories(stories, count)
