"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

RequestId = Union[StrictInt, StrictFloat, StrictStr, None]


# ============ BASE MODELS ============

class MCPRequest(BaseModel):
    """
    Base request - all MCP requests have these fields.
    `id` may be absent; check `model_fields_set` to tell absent from null.
    """
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    id: RequestId = Field(default=None)
    method: Optional[StrictStr] = Field(default=None)
    params: Any = Field(default=None)

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set


class MCPError(BaseModel):
    """Error structure."""
    code: int = Field(...)
    message: str = Field(...)
    data: Optional[Any] = Field(default=None)


class MCPResponse(BaseModel):
    """
    Base response - exactly one of result/error is set.
    Dump with exclude_unset so an absent request id stays absent.
    """
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    id: RequestId = Field(default=None)
    result: Optional[dict[str, Any]] = Field(default=None)
    error: Optional[MCPError] = Field(default=None)


# ============ INITIALIZE ============

class ServerInfo(BaseModel):
    """Server identity sent in the initialize result."""
    name: str = Field(...)
    version: str = Field(...)


class InitializeResult(BaseModel):
    """Result of the initialize handshake."""
    protocolVersion: str = Field(default=PROTOCOL_VERSION)
    capabilities: dict[str, dict] = Field(
        default_factory=lambda: {"tools": {}, "logging": {}}
    )
    serverInfo: ServerInfo = Field(...)


# ============ TOOLS/CALL ============

class ToolsCallParams(BaseModel):
    """Params of a tools/call request."""
    name: StrictStr = Field(...)
    arguments: Optional[dict[str, Any]] = Field(default=None)


# Error codes
ERROR_PARSE_ERROR = -32700
ERROR_INVALID_REQUEST = -32600
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL_ERROR = -32603
