"""Tests for AutoRAGClient against a mocked HTTP transport."""

import json

import httpx
import pytest

from autorag_mcp.config import Settings
from autorag_mcp.errors import BackendError
from autorag_mcp.tools.search.client import AutoRAGClient
from autorag_mcp.tools.search.schemas import AiSearchRequest, RankingOptions, SearchRequest


def _transport(status_code: int = 200, body: object = None, seen: list | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body or "")

    return httpx.MockTransport(handler)


class TestSearch:
    async def test_posts_to_search_endpoint(self, settings: Settings) -> None:
        seen: list[httpx.Request] = []
        body = {"success": True, "result": {"object": "page", "data": []}, "errors": []}
        client = AutoRAGClient(settings, transport=_transport(body=body, seen=seen))

        result = await client.search(SearchRequest(query="hello", rewrite_query=False))

        assert result == {"object": "page", "data": []}
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == (
            "https://api.cloudflare.com/client/v4/accounts/acct-123/autorag/rags/docs-rag/search"
        )
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert json.loads(request.content) == {
            "query": "hello",
            "rewrite_query": False,
            "ranking_options": {"score_threshold": 0.5},
        }

    async def test_ai_search_sends_cursor(self, settings: Settings) -> None:
        seen: list[httpx.Request] = []
        body = {"success": True, "result": {"response": "answer"}}
        client = AutoRAGClient(settings, transport=_transport(body=body, seen=seen))

        result = await client.ai_search(AiSearchRequest(
            query="hello",
            rewrite_query=True,
            max_num_results=3,
            ranking_options=RankingOptions(score_threshold=0.7),
            cursor="abc",
        ))

        assert result == {"response": "answer"}
        assert str(seen[0].url).endswith("/autorag/rags/docs-rag/ai-search")
        assert json.loads(seen[0].content) == {
            "query": "hello",
            "rewrite_query": True,
            "max_num_results": 3,
            "ranking_options": {"score_threshold": 0.7},
            "cursor": "abc",
        }


class TestErrors:
    async def test_missing_configuration(self) -> None:
        client = AutoRAGClient(Settings(account_id="acct-123"), transport=_transport(body={}))

        with pytest.raises(BackendError, match="CLOUDFLARE_API_TOKEN, AUTORAG_NAME not configured"):
            await client.search(SearchRequest(query="x", rewrite_query=False))

    async def test_http_error_with_api_errors(self, settings: Settings) -> None:
        body = {"success": False, "result": None, "errors": [{"code": 7003, "message": "Could not route"}]}
        client = AutoRAGClient(settings, transport=_transport(status_code=404, body=body))

        with pytest.raises(BackendError, match="HTTP 404: Could not route"):
            await client.search(SearchRequest(query="x", rewrite_query=False))

    async def test_success_false(self, settings: Settings) -> None:
        client = AutoRAGClient(settings, transport=_transport(body={"success": False, "errors": []}))

        with pytest.raises(BackendError, match="unknown error"):
            await client.ai_search(AiSearchRequest(query="x", rewrite_query=True))

    async def test_non_json_body(self, settings: Settings) -> None:
        client = AutoRAGClient(settings, transport=_transport(status_code=502, body="Bad Gateway"))

        with pytest.raises(BackendError, match="HTTP 502 with a non-JSON body"):
            await client.search(SearchRequest(query="x", rewrite_query=False))

    @pytest.mark.parametrize("result", [["unexpected"], "text", 42])
    async def test_non_object_result(self, settings: Settings, result: object) -> None:
        client = AutoRAGClient(settings, transport=_transport(body={"success": True, "result": result}))

        with pytest.raises(BackendError, match="unexpected result"):
            await client.ai_search(AiSearchRequest(query="x", rewrite_query=True))

    async def test_null_result_is_empty(self, settings: Settings) -> None:
        client = AutoRAGClient(settings, transport=_transport(body={"success": True, "result": None}))

        assert await client.search(SearchRequest(query="x", rewrite_query=False)) == {}

    async def test_transport_error(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = AutoRAGClient(settings, transport=httpx.MockTransport(handler))

        with pytest.raises(BackendError, match="connection refused"):
            await client.search(SearchRequest(query="x", rewrite_query=False))
