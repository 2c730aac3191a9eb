"""
Tool registry and shape compiler for the AutoRAG MCP server.
NOTE:
1.MCP uses JSON Schema for tool input definitions.
2.Tools declare their parameters as shapes (see shapes.py); compile_schema turns a
shape into the JSON Schema clients see in tools/list. Compilation is total: a
shape it does not recognise becomes {"type": "object"}.
"""
from typing import Any

from .schemas import ToolDefinition, ToolHandler, ToolSchema
from .shapes import Boolean, Number, Object, Optional, Record, Shape, String, Union

PRIMITIVE_TYPES = {
    String: "string",
    Number: "number",
    Boolean: "boolean",
    Record: "object",
}


def _with_description(schema: dict[str, Any], description: str | None) -> dict[str, Any]:
    if description is not None:
        schema["description"] = description
    return schema


def compile_schema(shape: Shape) -> dict[str, Any]:
    """Convert a parameter shape to a JSON Schema dict."""
    match shape:
        case Union(options=options):
            return _with_description(
                {"oneOf": [compile_schema(option) for option in options]},
                shape.description,
            )

        case Object(fields=fields):
            properties = {}
            required = []
            for field_name, field_shape in fields.items():
                properties[field_name] = compile_schema(field_shape)
                if not isinstance(field_shape, Optional):
                    required.append(field_name)
            return _with_description(
                {"type": "object", "properties": properties, "required": required},
                shape.description,
            )

        case Optional(inner=inner):
            # The wrapper's description wins over the wrapped shape's
            compiled = compile_schema(inner)
            return _with_description(compiled, shape.description)

        case String() | Number() | Boolean() | Record():
            return _with_description(
                {"type": PRIMITIVE_TYPES[type(shape)]}, shape.description
            )

        case _:
            return {"type": "object"}


class ToolRegistry:
    """
    Ordered name -> ToolDefinition mapping.

    Built fresh for every request from a fixed tool table, so nothing here is
    shared between requests.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        shape: Shape,
        handler: ToolHandler,
    ) -> ToolDefinition:
        """
        Register `handler` as tool `name`.
        A second registration under the same name replaces the first but keeps
        its position in the listing.
        """
        tool_def = ToolDefinition(
            name=name,
            description=description,
            shape=shape,
            inputSchema=compile_schema(shape),
            function=handler,
        )
        self._tools[name] = tool_def
        return tool_def

    def list_tools(self) -> list[ToolSchema]:
        """Return all registered tools in registration order."""
        return [tool_def.to_schema() for tool_def in self._tools.values()]

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
