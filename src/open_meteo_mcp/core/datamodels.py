"""
Data models for the tool registry.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field

from open_meteo_mcp.core.helpers import _input_schema


class TextContent(BaseModel):
    """A single text block returned to the host."""
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result of a tool execution."""
    model_config = ConfigDict(frozen=True)

    name: str
    arguments: dict[str, Any]
    content: tuple[TextContent, ...]

    @classmethod
    def from_text(cls, name: str, arguments: dict[str, Any], text: str) -> ToolResult:
        return cls(name=name, arguments=arguments, content=(TextContent(text=text),))

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)


class ToolEntry(BaseModel):
    """Registry entry for a single tool."""
    name: str
    callable_fn: Callable[..., Awaitable[str]] = Field(exclude=True)
    args_model: type[BaseModel] = Field(exclude=True)
    description: str | None = None

    model_config = {"arbitrary_types_allowed": True}

    def get_description(self) -> str:
        """Get description from override or docstring."""
        if self.description:
            return self.description
        doc = inspect.getdoc(self.callable_fn) or ""
        return doc.split("\n\n", 1)[0].strip()

    def to_mcp_spec(self) -> dict[str, Any]:
        """Convert to an MCP tool descriptor."""
        return {
            "name": self.name,
            "description": self.get_description(),
            "inputSchema": _input_schema(self.args_model),
        }
