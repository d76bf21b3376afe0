"""Story source exceptions.

These exceptions represent failures of the remote story source and
typically map to 5xx HTTP responses (bad gateway, service unavailable).
"""

from beststories.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class StorySourceError(DomainException):
    """Raised when the remote story source cannot be reached.

    Covers network errors, non-2xx responses and timeouts once the
    client's retry budget is exhausted.
    """

    def __init__(
        self,
        message: str = "Failed to fetch stories from the remote source",
        url: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.UPSTREAM_UNAVAILABLE,
            details={"url": url} if url else None,
        )


class StoryNotFoundError(EntityNotFoundError):
    """Raised when a story id has no corresponding detail record."""

    def __init__(self, story_id: int) -> None:
        super().__init__(
            message=f"Story {story_id} not found",
            details={"story_id": story_id},
        )
        self.story_id = story_id
