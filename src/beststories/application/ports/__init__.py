"""Application ports (interfaces implemented by infrastructure)."""

from beststories.application.ports.story_source import StorySource

__all__ = ["StorySource"]
