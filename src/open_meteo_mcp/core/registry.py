"""
Tool Registry for advertising and dispatching tools.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ValidationError

from open_meteo_mcp.core.exceptions import (
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from open_meteo_mcp.core.helpers import _normalize_name, validation_errors
from open_meteo_mcp.core.datamodels import ToolEntry, ToolResult

if TYPE_CHECKING:
    from open_meteo_mcp.openmeteo.client import OpenMeteoClient

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry for managing tools."""

    def __init__(self):
        self._tools: dict[str, ToolEntry] = {}

    def register(
        self,
        fn: Callable | None = None,
        *,
        args_model: type[BaseModel],
        name: str | None = None,
        description: str | None = None,
    ) -> Callable:
        """
        Register an async tool together with its argument model.

        Usage:
            @registry.register(args_model=GeocodeArgs)
            async def geocode(args: GeocodeArgs, client: OpenMeteoClient) -> str: ...
        """
        def decorator(func: Callable) -> Callable:
            canonical = name or func.__name__
            if not canonical or _normalize_name(canonical) != canonical:
                raise ToolError(f"Invalid tool name: {canonical!r}")
            if canonical in self._tools:
                raise ToolError(f"Tool name collision: {canonical}")

            self._tools[canonical] = ToolEntry(
                name=canonical,
                callable_fn=func,
                args_model=args_model,
                description=description,
            )

            # Attach metadata to function
            func.__tool_name__ = canonical
            return func

        # Handle @registry.register(...) vs registry.register(fn, ...)
        if fn is not None:
            return decorator(fn)
        return decorator

    def get(self, name: str) -> ToolEntry:
        """Resolve a tool by its exact name."""
        if name not in self._tools:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        return self._tools[name]

    def validate(self, name: str, arguments: Any) -> BaseModel:
        """Validate raw arguments against the tool's argument model."""
        entry = self.get(name)

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            errors = [("arguments", "must be an object")]
            raise ToolValidationError("Invalid arguments: arguments: must be an object", errors)

        try:
            return entry.args_model.model_validate(arguments)
        except ValidationError as e:
            errors = validation_errors(e)
            detail = ", ".join(f"{path}: {reason}" for path, reason in errors)
            raise ToolValidationError(f"Invalid arguments: {detail}", errors) from e

    async def execute(
        self,
        name: str,
        arguments: Any,
        client: "OpenMeteoClient",
    ) -> ToolResult:
        """Validate arguments, run the tool and wrap its text output."""
        entry = self.get(name)
        validated = self.validate(entry.name, arguments)

        logger.debug(f"Executing {entry.name} with {validated!r}")
        text = await entry.callable_fn(validated, client)

        return ToolResult.from_text(entry.name, dict(arguments or {}), text)

    def list_tools(self) -> list[dict[str, Any]]:
        """Get all tools as MCP tool descriptors."""
        return [entry.to_mcp_spec() for entry in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __iter__(self):
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
