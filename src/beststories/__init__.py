"""Best Stories - ranked, cached Hacker News best stories."""

__version__ = "1.0.0"
