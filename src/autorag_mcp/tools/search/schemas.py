"""
Pydantic schemas for search tool arguments and AutoRAG request bodies.
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

DEFAULT_SCORE_THRESHOLD = 0.5


# ============ TOOL ARGUMENTS ============

class BasicSearchArgs(BaseModel):
    """Arguments of autorag_basic_search."""
    model_config = ConfigDict(extra="forbid")

    query: str = Field(description="The search query")
    score_threshold: Optional[Number] = Field(default=None)
    max_num_results: Optional[Number] = Field(default=None)


class RewriteSearchArgs(BasicSearchArgs):
    """Arguments of autorag_rewrite_search."""
    rewrite_query: Optional[bool] = Field(default=None)


class AiSearchArgs(RewriteSearchArgs):
    """Arguments of autorag_ai_search."""
    include_ai_response: Optional[bool] = Field(default=None)
    cursor: Optional[str] = Field(default=None)


# ============ BACKEND REQUESTS ============

class RankingOptions(BaseModel):
    score_threshold: Number = Field(default=DEFAULT_SCORE_THRESHOLD)


class SearchRequest(BaseModel):
    """Body of POST .../search (no answer generation)."""
    query: str
    rewrite_query: bool
    max_num_results: Optional[Number] = None
    ranking_options: RankingOptions = Field(default_factory=RankingOptions)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class AiSearchRequest(SearchRequest):
    """Body of POST .../ai-search (answer generation)."""
    cursor: Optional[str] = None
