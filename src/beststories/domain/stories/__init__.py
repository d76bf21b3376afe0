"""Stories bounded context."""

from beststories.domain.stories.exceptions import (
    StoryNotFoundError,
    StorySourceError,
)
from beststories.domain.stories.raw_story import RawStory
from beststories.domain.stories.story import Story, rank_stories

__all__ = [
    "RawStory",
    "Story",
    "StoryNotFoundError",
    "StorySourceError",
    "rank_stories",
]
