"""Story schemas for API request/response serialization."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from beststories.domain.stories import Story


class StoryResponse(BaseModel):
    """A best story with locally stamped enrichment metadata."""

    title: str = Field(description="Story title")
    uri: str | None = Field(None, description="Link target, null for text posts")
    posted_by: str = Field(description="Author handle")
    time: datetime = Field(description="When the story was posted (UTC)")
    score: int = Field(description="Popularity score")
    comment_count: int = Field(description="Total number of comments")
    created_at: datetime = Field(description="When this record was produced")
    created_on: str = Field(description="Service instance that produced it")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Show HN: A tiny search engine for personal notes",
                "uri": "https://example.com/notes-search",
                "posted_by": "pg",
                "time": "2019-10-12T13:43:01Z",
                "score": 1716,
                "comment_count": 572,
                "created_at": "2024-05-01T09:30:00Z",
                "created_on": "api-1",
            },
        },
    )

    @classmethod
    def from_story(cls, story: Story) -> "StoryResponse":
        return cls(
            title=story.title,
            uri=story.uri,
            posted_by=story.posted_by,
            time=story.time,
            score=story.score,
            comment_count=story.comment_count,
            created_at=story.created_at,
            created_on=story.created_on,
        )
