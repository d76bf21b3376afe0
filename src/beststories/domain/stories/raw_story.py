"""Raw story value object."""

from pydantic import BaseModel, ConfigDict, Field


class RawStory(BaseModel):
    """Value object representing a story detail record as served upstream.

    Field names follow the Hacker News item payload. Jobs and polls omit
    some fields, so everything except the id falls back to an empty value.
    """

    id: int = Field(..., gt=0, description="Remote item id")
    title: str = Field(default="", description="Story title")
    url: str | None = Field(default=None, description="Link target, absent for Ask HN")
    by: str = Field(default="", description="Author handle")
    time: int = Field(default=0, ge=0, description="Creation time, unix seconds")
    score: int = Field(default=0, ge=0, description="Popularity score")
    descendants: int = Field(default=0, ge=0, description="Total comment count")

    model_config = ConfigDict(
        frozen=True,  # Immutable
        extra="ignore",
    )
