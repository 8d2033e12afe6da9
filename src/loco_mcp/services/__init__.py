"""Services backing the Loco MCP tools."""

from .loco_service import LocoService

__all__ = ["LocoService"]
