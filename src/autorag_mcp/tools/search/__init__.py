"""
Search tools for the AutoRAG MCP Server.
"""
from functools import partial

from ..base import ToolRegistry
from ..shapes import Boolean, Number, Object, String
from .client import RetrievalBackend
from .utils import ai_search, basic_search, rewrite_search

SCORE_THRESHOLD = Number().optional().describe(
    "Minimum similarity score threshold (0.0 to 1.0, default: 0.5)"
)
MAX_NUM_RESULTS = Number().optional().describe("Maximum number of results to return")

BASIC_SEARCH_SHAPE = Object({
    "query": String().describe("The search query to find relevant documents"),
    "score_threshold": SCORE_THRESHOLD,
    "max_num_results": MAX_NUM_RESULTS,
})

REWRITE_SEARCH_SHAPE = Object({
    "query": String().describe("The search query to find relevant documents with AI query rewriting"),
    "score_threshold": SCORE_THRESHOLD,
    "max_num_results": MAX_NUM_RESULTS,
    "rewrite_query": Boolean().optional().describe("Whether to rewrite the query using AI (default: true)"),
})

AI_SEARCH_SHAPE = Object({
    "query": String().describe("The search query to find relevant documents with AI query rewriting"),
    "score_threshold": SCORE_THRESHOLD,
    "max_num_results": MAX_NUM_RESULTS,
    "rewrite_query": Boolean().optional().describe(
        "Whether to rewrite the query for better semantic matching (default: true)"
    ),
    "include_ai_response": Boolean().optional().describe(
        "Whether to include the AI-generated response in the output (default: false)"
    ),
    "cursor": String().optional().describe(
        "Pagination cursor from previous response to fetch next page of results"
    ),
})


def register(registry: ToolRegistry, backend: RetrievalBackend) -> None:
    """Register search tools, bound to `backend`."""
    registry.register(
        "autorag_basic_search",
        "Basic search for documents in Cloudflare AutoRAG without query rewriting or answer generation",
        BASIC_SEARCH_SHAPE,
        partial(basic_search, backend),
    )
    registry.register(
        "autorag_rewrite_search",
        "Search for documents in Cloudflare AutoRAG with AI query rewriting but NO answer generation "
        "(returns document chunks only)",
        REWRITE_SEARCH_SHAPE,
        partial(rewrite_search, backend),
    )
    registry.register(
        "autorag_ai_search",
        "Search documents in Cloudflare AutoRAG with AI query rewriting and optional AI-generated response. "
        "Returns document chunks and optionally AI answer.",
        AI_SEARCH_SHAPE,
        partial(ai_search, backend),
    )
