"""Hacker News API integration."""

from beststories.infrastructure.integration.hacker_news.client import (
    HackerNewsClient,
)

__all__ = ["HackerNewsClient"]
