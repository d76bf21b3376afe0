"""HTTP client for the Hacker News Firebase API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from beststories.application.ports import StorySource
from beststories.domain.stories import (
    RawStory,
    StoryNotFoundError,
    StorySourceError,
)

logger = logging.getLogger(__name__)

BEST_STORIES_PATH = "v0/beststories.json"
ITEM_PATH = "v0/item/{story_id}.json"

# Status codes worth another attempt; other 4xx responses fail immediately
RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})


class HackerNewsClient(StorySource):
    """Story source backed by the public Hacker News API.

    Every request gets ``attempt_timeout`` seconds per attempt and up to
    ``max_retries`` further attempts with exponential backoff starting at
    ``retry_delay`` seconds.
    """

    def __init__(
        self,
        base_url: str = "https://hacker-news.firebaseio.com/",
        timeout: float = 30.0,
        attempt_timeout: float = 10.0,
        max_retries: int = 3,
        retry_delay: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout
        self._attempt_timeout = attempt_timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def list_best_ids(self) -> list[int]:
        data = await self._get_json(BEST_STORIES_PATH)
        if data is None:
            return []
        if not isinstance(data, list):
            msg = "Unexpected best stories payload from Hacker News"
            raise StorySourceError(msg, url=BEST_STORIES_PATH)
        try:
            return [int(story_id) for story_id in data]
        except (TypeError, ValueError) as e:
            msg = "Unexpected best stories payload from Hacker News"
            raise StorySourceError(msg, url=BEST_STORIES_PATH) from e

    async def get_story(self, story_id: int) -> RawStory:
        path = ITEM_PATH.format(story_id=story_id)
        data = await self._get_json(path)
        if data is None:
            logger.warning("Story %d not found", story_id)
            raise StoryNotFoundError(story_id)
        if not isinstance(data, dict):
            msg = f"Unexpected payload for story {story_id}"
            raise StorySourceError(msg, url=path)
        try:
            return RawStory.model_validate(data)
        except PydanticValidationError as e:
            msg = f"Malformed payload for story {story_id}"
            raise StorySourceError(msg, url=path) from e

    async def _get_json(self, path: str) -> Any:
        """GET ``path`` and decode the JSON body, retrying transient failures."""
        client = await self._get_client()
        attempts = self._max_retries + 1
        last_error: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                response = await client.get(path, timeout=self._attempt_timeout)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                if status_code not in RETRYABLE_STATUS_CODES:
                    logger.warning(
                        "Hacker News returned error %d for %s",
                        status_code,
                        path,
                    )
                    msg = f"Hacker News returned status {status_code}"
                    raise StorySourceError(msg, url=path) from e
                last_error = e
            except httpx.TransportError as e:
                # Covers connect/read errors and timeouts
                last_error = e
            except ValueError as e:
                msg = "Hacker News returned an invalid JSON body"
                raise StorySourceError(msg, url=path) from e

            logger.warning(
                "Hacker News request %s failed (attempt %d/%d): %s",
                path,
                attempt,
                attempts,
                str(last_error) or type(last_error).__name__,
            )
            if attempt < attempts:
                await asyncio.sleep(self._retry_delay * 2 ** (attempt - 1))

        msg = f"Hacker News request failed after {attempts} attempts"
        raise StorySourceError(msg, url=path) from last_error
