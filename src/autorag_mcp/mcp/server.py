"""
MCP server - JSON-RPC dispatch and FastAPI routes.
"""
import json
import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from ..config import Settings
from ..errors import InternalError, McpError, MethodNotFoundError
from ..tools import build_registry
from ..tools.base import ToolRegistry
from ..tools.search.client import AutoRAGClient, RetrievalBackend
from .models import ERROR_INVALID_REQUEST, ERROR_PARSE_ERROR, JSONRPC_VERSION
from .utils import (
    error_response,
    handle_initialize,
    handle_prompts_list,
    handle_resources_list,
    handle_tools_call,
    handle_tools_list,
    parse_request,
    request_for_error,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def dispatch_request(payload: Any, registry: ToolRegistry, settings: Settings) -> dict:
    """
    Route one decoded JSON-RPC request and return its response.
    Never raises: every failure becomes a JSON-RPC error response.
    """
    try:
        request = parse_request(payload)
    except McpError as e:
        logger.warning("Invalid request: %s", e.data)
        return error_response(request_for_error(payload), e)

    logger.debug("MCP method %s", request.method)
    try:
        # Route: initialize
        if request.method == "initialize":
            return handle_initialize(request, settings)

        # Route: tools/list
        elif request.method == "tools/list":
            return handle_tools_list(request, registry)

        # Route: tools/call
        elif request.method == "tools/call":
            return await handle_tools_call(request, registry)

        # Route: resources/list, prompts/list (always empty)
        elif request.method == "resources/list":
            return handle_resources_list(request)

        elif request.method == "prompts/list":
            return handle_prompts_list(request)

        # Error: unknown method
        else:
            raise MethodNotFoundError(request.method)

    except McpError as e:
        logger.warning("%s failed: %s", request.method, e.message)
        return error_response(request, e)
    except Exception as e:
        logger.exception("Unhandled error in %s", request.method)
        return error_response(request, InternalError(str(e)))


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings.from_env()


def get_backend(settings: Settings = Depends(get_settings)) -> RetrievalBackend:
    """Backend the search tools call for this request."""
    return AutoRAGClient(settings)


@router.post("/mcp")
async def mcp_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    backend: RetrievalBackend = Depends(get_backend),
):
    """
    Main MCP endpoint.
    Builds a fresh tool registry and routes the request based on its method field.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Unparseable MCP request body: %s", e)
        return JSONResponse(
            status_code=400,
            content={
                "jsonrpc": JSONRPC_VERSION,
                "id": None,
                "error": {"code": ERROR_PARSE_ERROR, "message": f"Parse error: {e}"},
            },
        )

    registry = build_registry(settings, backend)
    return JSONResponse(content=await dispatch_request(payload, registry, settings))


@router.options("/mcp")
async def mcp_options():
    """Plain OPTIONS (no CORS preflight headers) is answered like a preflight."""
    return Response(status_code=200, headers={"Allow": "POST, OPTIONS"})


@router.api_route("/mcp", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"])
async def mcp_wrong_method():
    """Only POST carries JSON-RPC requests."""
    return JSONResponse(
        status_code=405,
        content={
            "jsonrpc": JSONRPC_VERSION,
            "id": None,
            "error": {
                "code": ERROR_INVALID_REQUEST,
                "message": "Invalid Request - only POST method supported",
            },
        },
        headers={"Allow": "POST, OPTIONS"},
    )
