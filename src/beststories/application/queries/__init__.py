"""Query layer. Read-only operations for retrieving data."""

from beststories.application.queries.get_best_stories_query import (
    GetBestStoriesQuery,
)

__all__ = ["GetBestStoriesQuery"]
