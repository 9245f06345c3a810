"""Hanuman - chat assistant backend with on-demand web search."""

__version__ = "1.0.0"
