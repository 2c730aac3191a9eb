"""
MCP utilities - handler functions for processing requests.
"""
import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..config import Settings
from ..errors import InternalError, InvalidParamsError, InvalidRequestError, McpError, ToolNotFoundError
from ..tools.base import ToolRegistry
from .models import (
    JSONRPC_VERSION,
    InitializeResult,
    MCPError,
    MCPRequest,
    MCPResponse,
    ServerInfo,
    ToolsCallParams,
)

logger = logging.getLogger(__name__)


def build_response(
    request: MCPRequest | None,
    result: dict[str, Any] | None = None,
    error: MCPError | None = None,
) -> dict:
    """
    Build a JSON-RPC response dict carrying exactly one of result/error.
    The request id is echoed as sent: null stays null, absent stays absent.
    """
    fields: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
    if request is None:
        fields["id"] = None
    elif request.has_id:
        fields["id"] = request.id

    if error is not None:
        fields["error"] = error
    else:
        fields["result"] = result if result is not None else {}

    return MCPResponse(**fields).model_dump(exclude_unset=True)


def error_response(request: MCPRequest | None, exc: McpError) -> dict:
    """Convert an McpError into a JSON-RPC error response."""
    fields: dict[str, Any] = {"code": exc.code, "message": exc.message}
    if exc.data is not None:
        fields["data"] = exc.data
    return build_response(request, error=MCPError(**fields))


def parse_request(payload: Any) -> MCPRequest:
    """
    Validate a decoded JSON body as a JSON-RPC request.

    Raises:
        InvalidRequestError: If the body is not an object or a field has the wrong type
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError("Invalid Request", data="Request body must be a JSON object")
    try:
        return MCPRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestError(
            "Invalid Request", data=e.errors(include_url=False, include_context=False)
        ) from e


def request_for_error(payload: Any) -> MCPRequest | None:
    """Best-effort request holding only the id of an invalid payload."""
    if not isinstance(payload, dict):
        return None
    if "id" not in payload:
        return MCPRequest()
    try:
        return MCPRequest(id=payload["id"])
    except ValidationError:
        return None


def handle_initialize(request: MCPRequest, settings: Settings) -> dict:
    """
    Handle initialize request.
    Returns protocol version, capabilities and server identity.
    """
    result = InitializeResult(
        serverInfo=ServerInfo(name=settings.server_name, version=__version__)
    )
    return build_response(request, result=result.model_dump())


def handle_tools_list(request: MCPRequest, registry: ToolRegistry) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format.
    """
    tools_json = [tool.model_dump() for tool in registry.list_tools()]
    return build_response(request, result={"tools": tools_json})


async def handle_tools_call(request: MCPRequest, registry: ToolRegistry) -> dict:
    """
    Handle tools/call request.
    Executes a tool and returns its content payload.

    Raises:
        InvalidParamsError: If params or arguments are malformed
        ToolNotFoundError: If no tool is registered under params.name
        InternalError: If the tool handler raises
    """
    try:
        params = ToolsCallParams.model_validate(request.params or {})
    except ValidationError as e:
        raise InvalidParamsError(
            data=e.errors(include_url=False, include_context=False)
        ) from e

    tool = registry.get(params.name)
    if tool is None:
        raise ToolNotFoundError(params.name)

    logger.debug("Calling tool %s", params.name)
    try:
        outcome = await tool.function(params.arguments or {})
    except McpError:
        raise
    except Exception as e:
        logger.exception("Tool %s raised", params.name)
        raise InternalError(str(e)) from e

    return build_response(request, result=outcome.to_content())


def handle_resources_list(request: MCPRequest) -> dict:
    """No resources are exposed; present for MCP clients that ask."""
    return build_response(request, result={"resources": []})


def handle_prompts_list(request: MCPRequest) -> dict:
    """No prompts are exposed; present for MCP clients that ask."""
    return build_response(request, result={"prompts": []})
