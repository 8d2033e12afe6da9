"""Data models for the Loco MCP server."""

from .loco import Language
from .responses import ErrorKind, NormalizedResult

__all__ = [
    "ErrorKind",
    "Language",
    "NormalizedResult",
]
