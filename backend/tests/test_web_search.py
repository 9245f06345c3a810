"""
Unit tests for Web Search tool.
"""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hanuman.core.errors import RetrievalError
from hanuman.tools.web_search import WebSearchTool, decode_snippets, encode_snippets


def _mock_client(mock_client, response=None, post_error=None):
    mock_instance = AsyncMock()
    if post_error is not None:
        mock_instance.post.side_effect = post_error
    else:
        mock_instance.post.return_value = response
    mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
    mock_instance.__aexit__ = AsyncMock(return_value=False)
    mock_client.return_value = mock_instance
    return mock_instance


def _json_response(payload):
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = MagicMock()
    return mock_response


class TestWebSearchTool:
    """Tests for WebSearchTool."""

    def test_init(self):
        tool = WebSearchTool(api_key="test-key", provider="tavily")
        assert tool.api_key == "test-key"
        assert tool.provider == "tavily"
        assert tool.max_results == 5
        assert tool.name == "webSearch"

    @pytest.mark.asyncio
    async def test_search_tavily(self):
        tool = WebSearchTool(api_key="test-key", timeout=7.0)
        response = _json_response({
            "results": [
                {"title": "Delhi Weather", "url": "https://example.com/1", "content": "sunny, 30C"},
                {"title": "Forecast", "url": "https://example.com/2", "content": "clear skies"},
            ]
        })

        with patch("httpx.AsyncClient") as mock_client:
            instance = _mock_client(mock_client, response)

            results = await tool.search("weather in Delhi")

            assert results == ["sunny, 30C", "clear skies"]
            mock_client.assert_called_once_with(timeout=7.0)
            payload = instance.post.call_args.kwargs["json"]
            assert payload["query"] == "weather in Delhi"
            assert payload["max_results"] == 5
            assert payload["api_key"] == "test-key"

    @pytest.mark.asyncio
    async def test_search_truncates_to_max_results(self):
        tool = WebSearchTool(api_key="k", max_results=2)
        response = _json_response({"results": [{"content": str(i)} for i in range(4)]})

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, response)
            assert await tool.search("q") == ["0", "1"]

    @pytest.mark.asyncio
    async def test_missing_content_becomes_empty_string(self):
        tool = WebSearchTool(api_key="k")
        response = _json_response({"results": [{"title": "no content"}, {"content": None}]})

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, response)
            assert await tool.search("q") == ["", ""]

    @pytest.mark.asyncio
    async def test_http_error_raises_retrieval_error(self):
        tool = WebSearchTool(api_key="k")
        response = MagicMock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "server error", request=MagicMock(), response=MagicMock(status_code=502)
        )

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, response)
            with pytest.raises(RetrievalError, match="502"):
                await tool.search("q")

    @pytest.mark.asyncio
    async def test_unreachable_raises_retrieval_error(self):
        tool = WebSearchTool(api_key="k")

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, post_error=httpx.ConnectError("connection refused"))
            with pytest.raises(RetrievalError):
                await tool.search("q")

    @pytest.mark.asyncio
    async def test_timeout_raises_retrieval_error(self):
        tool = WebSearchTool(api_key="k")

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, post_error=httpx.ReadTimeout("timed out"))
            with pytest.raises(RetrievalError):
                await tool.search("q")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"results": "oops"}, {"results": ["not a dict"]}])
    async def test_malformed_body_raises_retrieval_error(self, payload):
        tool = WebSearchTool(api_key="k")

        with patch("httpx.AsyncClient") as mock_client:
            _mock_client(mock_client, _json_response(payload))
            with pytest.raises(RetrievalError, match="malformed"):
                await tool.search("q")

    @pytest.mark.asyncio
    async def test_search_unsupported_provider(self):
        tool = WebSearchTool(api_key="key", provider="unsupported")

        with patch("httpx.AsyncClient") as mock_client:
            with pytest.raises(RetrievalError, match="Unsupported"):
                await tool.search("test query")

        mock_client.assert_not_called()


class TestSnippetSerialization:
    """Tests for the tool message content format."""

    def test_round_trip_preserves_order_and_text(self):
        snippets = ["sunny, 30C", "", "quotes \" and unicode: नमस्ते", "line\nbreak"]
        assert decode_snippets(encode_snippets(snippets)) == snippets

    def test_encoded_form_is_json_array(self):
        assert encode_snippets(["sunny, 30C"]) == '["sunny, 30C"]'

    def test_decode_rejects_non_list(self):
        with pytest.raises(ValueError):
            decode_snippets('{"a": 1}')
