"""Conversion of operation results into MCP tool responses."""

from __future__ import annotations

from fastmcp.exceptions import ToolError

from .models.responses import NormalizedResult


def format_tool_response(result: NormalizedResult) -> str:
    """Return the JSON text payload of a successful result.

    Failed results raise ``ToolError`` carrying the same JSON payload, which
    FastMCP reports to the host as an error-flagged text response.
    """
    if not result.success:
        raise ToolError(result.to_tool_text())
    return result.to_tool_text()
