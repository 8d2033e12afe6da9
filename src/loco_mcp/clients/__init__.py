"""HTTP client helpers for the Loco MCP server."""

from .loco import LocoClient, execute_loco_query

__all__ = [
    "LocoClient",
    "execute_loco_query",
]
