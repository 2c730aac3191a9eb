"""
Search tool handlers backed by Cloudflare AutoRAG.
"""
import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ...errors import InvalidParamsError
from ..schemas import ToolFailure, ToolOutcome, ToolSuccess
from .client import RetrievalBackend
from .schemas import (
    DEFAULT_SCORE_THRESHOLD,
    AiSearchArgs,
    AiSearchRequest,
    BasicSearchArgs,
    RankingOptions,
    RewriteSearchArgs,
    SearchRequest,
)

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound=BaseModel)

FILTERS_NOT_SUPPORTED = (
    "Metadata filtering is not supported by this server. "
    "Please use the AutoRAG REST API directly for filtered queries. "
    "See: https://developers.cloudflare.com/autorag/usage/rest-api/"
)

# Fields copied to the AI search output when the generated answer is excluded
AI_SEARCH_FIELDS = ("object", "search_query", "data", "has_more", "next_page")


def parse_arguments(model: type[ArgsT], arguments: dict[str, Any]) -> ArgsT:
    """
    Validate tool arguments against `model`.

    Raises:
        InvalidParamsError: If `filters` is given, a field is unknown, or a value has the wrong type
    """
    if "filters" in arguments:
        raise InvalidParamsError(data=FILTERS_NOT_SUPPORTED)
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidParamsError(
            data=e.errors(include_url=False, include_context=False)
        ) from e


def _ranking(score_threshold: float | None) -> RankingOptions:
    if score_threshold is None:
        return RankingOptions(score_threshold=DEFAULT_SCORE_THRESHOLD)
    return RankingOptions(score_threshold=score_threshold)


def _to_text(result: dict[str, Any]) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


async def basic_search(backend: RetrievalBackend, arguments: dict[str, Any]) -> ToolOutcome:
    """Search without query rewriting or answer generation."""
    args = parse_arguments(BasicSearchArgs, arguments)
    request = SearchRequest(
        query=args.query,
        rewrite_query=False,
        max_num_results=args.max_num_results,
        ranking_options=_ranking(args.score_threshold),
    )
    try:
        result = await backend.search(request)
    except Exception as e:
        logger.warning("Basic search failed: %s", e)
        return ToolFailure(text=f"Error searching AutoRAG: {e}")

    return ToolSuccess(text=_to_text(result))


async def rewrite_search(backend: RetrievalBackend, arguments: dict[str, Any]) -> ToolOutcome:
    """Search with query rewriting (default on) but no answer generation."""
    args = parse_arguments(RewriteSearchArgs, arguments)
    request = SearchRequest(
        query=args.query,
        rewrite_query=True if args.rewrite_query is None else args.rewrite_query,
        max_num_results=args.max_num_results,
        ranking_options=_ranking(args.score_threshold),
    )
    try:
        result = await backend.search(request)
    except Exception as e:
        logger.warning("Rewrite search failed: %s", e)
        return ToolFailure(text=f"Error in AutoRAG rewrite search: {e}")

    return ToolSuccess(text=_to_text(result))


def shape_ai_search_result(result: dict[str, Any], include_ai_response: bool) -> dict[str, Any]:
    """
    Re-shape an ai-search response for output.

    Drops the generated `response` unless asked for, and adds `nextCursor`
    when the backend reports a next page.
    """
    if include_ai_response:
        shaped = dict(result)
    else:
        shaped = {key: result[key] for key in AI_SEARCH_FIELDS if key in result}

    next_page = result.get("next_page")
    if next_page:
        shaped["nextCursor"] = next_page
    return shaped


async def ai_search(backend: RetrievalBackend, arguments: dict[str, Any]) -> ToolOutcome:
    """Search with query rewriting and answer generation, answer opt-in."""
    args = parse_arguments(AiSearchArgs, arguments)
    request = AiSearchRequest(
        query=args.query,
        rewrite_query=True if args.rewrite_query is None else args.rewrite_query,
        max_num_results=args.max_num_results,
        ranking_options=_ranking(args.score_threshold),
        cursor=args.cursor,
    )
    try:
        result = await backend.ai_search(request)
        shaped = shape_ai_search_result(result, include_ai_response=bool(args.include_ai_response))
    except Exception as e:
        logger.warning("AI search failed: %s", e)
        return ToolFailure(text=f"Error in AutoRAG AI search: {e}")

    return ToolSuccess(text=_to_text(shaped))
