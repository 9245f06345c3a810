"""Tools module - external capabilities the assistant can invoke."""

from .web_search import WebSearchTool, encode_snippets, decode_snippets

__all__ = ['WebSearchTool', 'encode_snippets', 'decode_snippets']
