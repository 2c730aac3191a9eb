"""Shared error types for the MCP server."""
from typing import Any

from .mcp.models import (
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_PARAMS,
    ERROR_INVALID_REQUEST,
    ERROR_METHOD_NOT_FOUND,
)


class McpError(Exception):
    """Base error that maps onto a JSON-RPC error object."""

    code: int = ERROR_INVALID_REQUEST

    def __init__(self, message: str, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)


class InvalidRequestError(McpError):
    """The request body is not a JSON-RPC 2.0 request."""

    code = ERROR_INVALID_REQUEST


class MethodNotFoundError(McpError):
    """The requested JSON-RPC method is not supported."""

    code = ERROR_METHOD_NOT_FOUND

    def __init__(self, method: str | None) -> None:
        self.method = method
        message = f"Method '{method}' not supported" if method else "Method is required"
        super().__init__(message)


class ToolNotFoundError(McpError):
    """Requested tool does not exist in the registry."""

    code = ERROR_METHOD_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' not found", data={"name": name})


class InvalidParamsError(McpError):
    """Tool arguments are missing, malformed or not supported."""

    code = ERROR_INVALID_PARAMS

    def __init__(self, data: Any = None, message: str = "Invalid params") -> None:
        super().__init__(message, data=data)


class InternalError(McpError):
    """Unexpected failure while handling a request."""

    code = ERROR_INTERNAL_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(f"Internal error: {detail}")


class BackendError(Exception):
    """The AutoRAG backend rejected a call or could not be reached.

    Never leaves a tool handler: handlers turn it into failure text.
    """
