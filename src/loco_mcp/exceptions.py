"""Shared exception types for Loco MCP server."""

from __future__ import annotations

from typing import Optional


class LocoMCPError(RuntimeError):
    """Base exception for Loco MCP server errors."""

    def __init__(self, message: str, *, error_code: str = "loco_mcp_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class ConfigurationError(LocoMCPError):
    """Process-level configuration is missing or invalid.

    Raised while resolving settings at startup. No tool call can succeed
    without a valid configuration, so the entry point exits on it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="CONFIGURATION_ERROR")


class TransportError(LocoMCPError):
    """A GraphQL request did not produce a usable JSON body.

    ``status_code`` is set when the remote answered with a non-2xx status and
    is ``None`` for network and parsing failures.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message, error_code="TRANSPORT_ERROR")
        self.status_code = status_code
