"""
Parameter shape descriptors for tool inputs.

A shape is a small closed set of variants describing what a tool accepts:

    Object({
        "query": String().describe("The search query"),
        "max_num_results": Number().optional().describe("Result cap"),
    })

Shapes are purely descriptive. `tools.base.compile_schema` turns them into the
JSON Schema advertised in tools/list.
"""
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class _ShapeBase:
    description: str | None = field(default=None, kw_only=True)

    def describe(self, description: str) -> "Shape":
        """Return a copy carrying `description`."""
        return replace(self, description=description)

    def optional(self) -> "Optional":
        """Wrap in Optional, so the field is left out of `required`."""
        return Optional(self)


@dataclass(frozen=True)
class String(_ShapeBase):
    pass


@dataclass(frozen=True)
class Number(_ShapeBase):
    pass


@dataclass(frozen=True)
class Boolean(_ShapeBase):
    pass


@dataclass(frozen=True)
class Record(_ShapeBase):
    """Free-form JSON object with no declared fields."""


@dataclass(frozen=True)
class Object(_ShapeBase):
    """Object with named fields; field order is kept for schema emission."""
    fields: dict[str, "Shape"] = field(default_factory=dict)


@dataclass(frozen=True)
class Optional(_ShapeBase):
    inner: "Shape"


@dataclass(frozen=True)
class Union(_ShapeBase):
    options: tuple["Shape", ...] = ()


Shape = String | Number | Boolean | Record | Object | Optional | Union
