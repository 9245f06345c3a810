"""
Web Search Tool - Provides real-time web retrieval for the chat orchestrator.
Supports the Tavily search API.
"""

import httpx
import json
import logging
import time
from typing import List

from ..core.errors import RetrievalError

logger = logging.getLogger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class WebSearchTool:
    """
    Web search tool used when the model asks for current information.
    Returns the text content of each result, in ranking order.
    """

    name = "webSearch"

    def __init__(
        self,
        api_key: str,
        provider: str = "tavily",
        max_results: int = 5,
        search_depth: str = "basic",
        timeout: float = 30.0,
    ):
        """
        Initialize web search tool.

        Args:
            api_key: API key for the search provider
            provider: Search provider ("tavily")
            max_results: Upper bound on snippets returned per query
            search_depth: Tavily search depth ("basic" or "advanced")
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.provider = provider
        self.max_results = max_results
        self.search_depth = search_depth
        self.timeout = timeout

    async def search(self, query: str) -> List[str]:
        """
        Perform a web search.

        Args:
            query: Free-text search query

        Returns:
            Ordered list of content snippets, at most max_results long

        Raises:
            RetrievalError: provider unsupported, unreachable, timed out, or malformed response
        """
        if self.provider == "tavily":
            return await self._search_tavily(query)
        logger.error(f"Unsupported search provider: {self.provider}")
        raise RetrievalError(f"Unsupported search provider: {self.provider}")

    async def _search_tavily(self, query: str) -> List[str]:
        """Perform search using Tavily API."""
        start_time = time.time()
        logger.info(f"Calling web search: {query}")
        payload = {
            "api_key": self.api_key,
            "query": query,
            "max_results": self.max_results,
            "search_depth": self.search_depth,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(TAVILY_SEARCH_URL, json=payload)
                resp.raise_for_status()
                data = resp.json()

            items = data["results"]
            if not isinstance(items, list):
                raise TypeError("results is not a list")
            snippets = [str(item.get("content") or "") for item in items]
        except httpx.HTTPStatusError as e:
            logger.error(f"Web search failed: HTTP {e.response.status_code}", exc_info=True)
            raise RetrievalError(f"{self.provider} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Web search failed: {e}", exc_info=True)
            raise RetrievalError(f"{self.provider} request failed: {e}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Web search returned malformed data: {e}", exc_info=True)
            raise RetrievalError(f"{self.provider} returned a malformed response") from e

        snippets = snippets[:self.max_results]
        logger.info(
            "Web search completed",
            extra={"extra_fields": {
                "provider": self.provider,
                "results": len(snippets),
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }}
        )
        return snippets


def encode_snippets(snippets: List[str]) -> str:
    """Serialize a retrieval result for the content of a tool message."""
    return json.dumps(list(snippets), ensure_ascii=False)


def decode_snippets(content: str) -> List[str]:
    """Inverse of encode_snippets."""
    snippets = json.loads(content)
    if not isinstance(snippets, list) or not all(isinstance(s, str) for s in snippets):
        raise ValueError("Tool content is not a list of snippets")
    return snippets
