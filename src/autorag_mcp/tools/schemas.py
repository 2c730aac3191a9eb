"""
Tool schema definitions for the AutoRAG MCP server.

ToolSchema: JSON-serializable format for MCP responses.
ToolDefinition: Internal storage that includes the handler.
ToolSuccess / ToolFailure: what a handler returns.
"""

from typing import Annotated, Any, Awaitable, Callable, Literal, Union
from pydantic import BaseModel, Field

from .shapes import Shape


class TextContent(BaseModel):
    """Single text item of a tool result."""
    type: Literal["text"] = "text"
    text: str


class ContentPayload(BaseModel):
    """Result body of tools/call."""
    content: list[TextContent]


class ToolSuccess(BaseModel):
    """Handler finished and `text` holds its output."""
    kind: Literal["ok"] = "ok"
    text: str

    def to_content(self) -> dict[str, Any]:
        return ContentPayload(content=[TextContent(text=self.text)]).model_dump()


class ToolFailure(BaseModel):
    """
    Handler failed and `text` explains why.

    Serialized exactly like ToolSuccess: tool output is read by an LLM or a
    person, so a failure is reported as readable text, not as a JSON-RPC error.
    """
    kind: Literal["failure"] = "failure"
    text: str

    def to_content(self) -> dict[str, Any]:
        return ContentPayload(content=[TextContent(text=self.text)]).model_dump()


ToolOutcome = Annotated[Union[ToolSuccess, ToolFailure], Field(discriminator="kind")]

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolOutcome]]


class ToolSchema(BaseModel):
    """
    MCP-compliant tool format.
    Sent to clients via tools/list response.
    """
    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="What the tool does")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema for parameters")


class ToolDefinition:
    """
    Internal tool storage.
    Includes the shape it was declared with and the handler to execute.
    """
    def __init__(
        self,
        name: str,
        description: str,
        shape: Shape,
        inputSchema: dict[str, Any],
        function: ToolHandler
    ):
        self.name = name
        self.description = description
        self.shape = shape
        self.inputSchema = inputSchema
        self.function = function

    def to_schema(self) -> ToolSchema:
        """Convert to MCP-compliant format (drops handler)."""
        return ToolSchema(
            name=self.name,
            description=self.description,
            inputSchema=self.inputSchema
        )
