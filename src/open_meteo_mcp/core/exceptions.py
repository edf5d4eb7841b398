"""
Exception classes for the tool registry and the upstream client.
"""

from __future__ import annotations


class ToolError(Exception):
    """Base exception for tool-related errors."""


class ToolNotFoundError(ToolError):
    """Tool not found in registry."""


class ToolValidationError(ToolError):
    """Tool argument validation failed.

    ``errors`` holds one ``(path, reason)`` pair per offending field.
    """

    def __init__(self, message: str, errors: list[tuple[str, str]] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])


class UpstreamError(ToolError):
    """The upstream HTTP request failed or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ToolError):
    """Upstream JSON is missing fields needed to format a result."""
