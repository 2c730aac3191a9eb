"""Shared fixtures: settings, an in-memory AutoRAG backend and a registry bound to it."""

from __future__ import annotations

from typing import Any

import pytest

from autorag_mcp.config import Settings
from autorag_mcp.tools import build_registry
from autorag_mcp.tools.base import ToolRegistry
from autorag_mcp.tools.search.schemas import AiSearchRequest, SearchRequest

SEARCH_RESULT: dict[str, Any] = {
    "object": "vector_store.search_results.page",
    "search_query": "what is autorag",
    "data": [
        {
            "file_id": "doc-1",
            "content": "AutoRAG is a managed retrieval pipeline.",
            "score": 0.82,
            "metadata": {"source": "docs"},
        }
    ],
}

AI_SEARCH_RESULT: dict[str, Any] = {
    "object": "vector_store.search_results.page",
    "search_query": "what is autorag",
    "response": "AutoRAG is Cloudflare's managed RAG service.",
    "data": [
        {
            "file_id": "doc-1",
            "filename": "intro.md",
            "score": 0.82,
            "attributes": {"folder": "guides"},
            "content": [{"id": "c-1", "type": "text", "text": "AutoRAG is a managed retrieval pipeline."}],
        }
    ],
    "has_more": True,
    "next_page": "page-2-token",
}


class FakeBackend:
    """Records every call and returns canned results, or raises `error`."""

    def __init__(
        self,
        search_result: dict[str, Any] | None = None,
        ai_search_result: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.search_result = search_result if search_result is not None else dict(SEARCH_RESULT)
        self.ai_search_result = ai_search_result if ai_search_result is not None else dict(AI_SEARCH_RESULT)
        self.error = error
        self.calls: list[tuple[str, SearchRequest]] = []

    async def search(self, request: SearchRequest) -> dict[str, Any]:
        self.calls.append(("search", request))
        if self.error is not None:
            raise self.error
        return self.search_result

    async def ai_search(self, request: AiSearchRequest) -> dict[str, Any]:
        self.calls.append(("ai_search", request))
        if self.error is not None:
            raise self.error
        return self.ai_search_result


@pytest.fixture
def settings() -> Settings:
    return Settings(account_id="acct-123", api_token="secret-token", rag_name="docs-rag")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def registry(settings: Settings, backend: FakeBackend) -> ToolRegistry:
    return build_registry(settings, backend)
