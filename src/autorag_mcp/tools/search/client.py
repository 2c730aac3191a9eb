"""
AutoRAG REST client - the retrieval backend behind the search tools.
"""
import logging
from typing import Any, Protocol

import httpx

from ...config import Settings
from ...errors import BackendError
from .schemas import AiSearchRequest, SearchRequest

logger = logging.getLogger(__name__)


class RetrievalBackend(Protocol):
    """What the search tools need from a backend."""

    async def search(self, request: SearchRequest) -> dict[str, Any]: ...

    async def ai_search(self, request: AiSearchRequest) -> dict[str, Any]: ...


class AutoRAGClient:
    """
    Calls the Cloudflare AutoRAG REST API.

    Opens one HTTP client per call; no retries. Every failure (missing
    configuration, transport error, HTTP error status, `success: false`)
    is raised as BackendError.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    async def search(self, request: SearchRequest) -> dict[str, Any]:
        """Search documents without generating an answer."""
        return await self._post("search", request.to_payload())

    async def ai_search(self, request: AiSearchRequest) -> dict[str, Any]:
        """Search documents and generate an answer."""
        return await self._post("ai-search", request.to_payload())

    def _endpoint(self, operation: str) -> str:
        settings = self._settings
        missing = [
            env_var
            for env_var, value in (
                ("CLOUDFLARE_ACCOUNT_ID", settings.account_id),
                ("CLOUDFLARE_API_TOKEN", settings.api_token),
                ("AUTORAG_NAME", settings.rag_name),
            )
            if not value
        ]
        if missing:
            raise BackendError(f"{', '.join(missing)} not configured")

        base_url = settings.api_base_url.rstrip("/")
        return f"{base_url}/accounts/{settings.account_id}/autorag/rags/{settings.rag_name}/{operation}"

    async def _post(self, operation: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = self._endpoint(operation)
        headers = {"Authorization": f"Bearer {self._settings.api_token}"}

        logger.debug("AutoRAG %s: %s", operation, payload)
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout, transport=self._transport
            ) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise BackendError(f"AutoRAG request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            raise BackendError(f"AutoRAG returned HTTP {response.status_code} with a non-JSON body")

        if response.is_error or not body.get("success", False):
            raise BackendError(_error_message(response.status_code, body))

        result = body.get("result")
        if result is None:
            return {}
        if not isinstance(result, dict):
            raise BackendError(f"AutoRAG returned an unexpected result of type {type(result).__name__}")
        return result


def _error_message(status_code: int, body: dict[str, Any]) -> str:
    messages = [
        str(error.get("message", error)) if isinstance(error, dict) else str(error)
        for error in body.get("errors") or []
    ]
    detail = "; ".join(messages) if messages else "unknown error"
    return f"AutoRAG returned HTTP {status_code}: {detail}"
