"""Story source port for the application layer.

This abstracts the remote story listing, allowing the application layer
to remain independent of infrastructure details like HTTP clients,
retries and timeouts.
"""

from abc import ABC, abstractmethod

from beststories.domain.stories import RawStory


class StorySource(ABC):
    """Port for the remote listing of best stories.

    Implementations own the transport policy (timeouts, retries, backoff).
    Callers only see whether a call ultimately succeeded.
    """

    @abstractmethod
    async def list_best_ids(self) -> list[int]:
        """Return the current ranked list of best story ids.

        Raises
        ------
        StorySourceError
            If the listing could not be fetched.
        """

    @abstractmethod
    async def get_story(self, story_id: int) -> RawStory:
        """Return the detail record of a single story.

        Raises
        ------
        StorySourceError
            If the detail record could not be fetched.
        StoryNotFoundError
            If the remote source has no record for ``story_id``.
        """

    async def close(self) -> None:  # noqa: B027 - optional hook
        """Release transport resources."""
