"""Loco MCP Server - Loco translation management over the Model Context Protocol.

This package exposes Loco GraphQL operations (product listing, product
translation removal, glossary updates) as MCP tools.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .clients.loco import LocoClient
from .config import LocoSettings
from .exceptions import ConfigurationError, LocoMCPError, TransportError
from .models import ErrorKind, Language, NormalizedResult
from .services.loco_service import LocoService

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "Language",
    "LocoClient",
    "LocoMCPError",
    "LocoService",
    "LocoSettings",
    "NormalizedResult",
    "TransportError",
    "__version__",
]
