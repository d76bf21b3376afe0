"""API request/response schemas."""

from beststories.presentation.api.schemas.common import ErrorResponse, HealthResponse
from beststories.presentation.api.schemas.stories import StoryResponse

__all__ = ["ErrorResponse", "HealthResponse", "StoryResponse"]
