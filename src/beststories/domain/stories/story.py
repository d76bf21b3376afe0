"""Enriched story value object and ranking rules."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from beststories.domain.stories.raw_story import RawStory


class Story(BaseModel):
    """A raw story plus metadata stamped when it was mapped locally.

    ``created_at`` and ``created_on`` describe the enrichment event, not the
    remote fetch: a story served from cache carries the time of the access
    that produced it.
    """

    title: str
    uri: str | None = None
    posted_by: str
    time: datetime = Field(..., description="When the story was posted (UTC)")
    score: int = Field(..., ge=0)
    comment_count: int = Field(..., ge=0)
    created_at: datetime = Field(..., description="When this record was mapped")
    created_on: str = Field(..., description="Instance that mapped this record")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw(
        cls,
        raw: RawStory,
        created_on: str,
        created_at: datetime | None = None,
    ) -> Story:
        return cls(
            title=raw.title,
            uri=raw.url,
            posted_by=raw.by,
            time=datetime.fromtimestamp(raw.time, tz=timezone.utc),
            score=raw.score,
            comment_count=raw.descendants,
            created_at=created_at or datetime.now(tz=timezone.utc),
            created_on=created_on,
        )


def rank_stories(stories: Iterable[Story], count: int) -> list[Story]:
    """Return the ``count`` highest scoring stories, best first.

    ``sorted`` is stable, so stories with equal scores keep the order in
    which they were given.
    """
    if count <= 0:
        return []
    ranked = sorted(stories, key=lambda story: story.score, reverse=True)
    return ranked[:count]
