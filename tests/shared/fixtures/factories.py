"""Factories for story test data."""

from beststories.domain.stories import RawStory

BASE_TIME = 1_700_000_000


def make_raw_story(story_id: int, score: int, **overrides) -> RawStory:
    """Build a raw story with sensible defaults."""
    data = {
        "id": story_id,
        "title": f"Story {story_id}",
        "url": f"https://example.com/{story_id}",
        "by": f"user{story_id}",
        "time": BASE_TIME + story_id,
        "score": score,
        "descendants": story_id * 2,
    }
    data.update(overrides)
    return RawStory.model_validate(data)


def make_raw_stories(scores: dict[int, int]) -> dict[int, RawStory]:
    """Build raw stories keyed by id from an ``{id: score}`` mapping."""
    return {
        story_id: make_raw_story(story_id, score)
        for story_id, score in scores.items()
    }
