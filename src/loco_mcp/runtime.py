"""Process-wide access to the configured Loco service for tool functions.

The service is built once from explicit settings at startup; tool functions,
which FastMCP calls with tool arguments only, look it up here.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from .exceptions import LocoMCPError
from .services.loco_service import LocoService


_active_service: Optional[LocoService] = None


def set_active_service(service: Optional[LocoService]) -> None:
    global _active_service
    _active_service = service


def get_active_service() -> LocoService:
    """Return the service configured at startup."""

    if _active_service is None:
        raise LocoMCPError("Loco service is not configured", error_code="SERVICE_NOT_CONFIGURED")
    return _active_service


@contextmanager
def service_context(service: LocoService) -> Iterator[LocoService]:
    """Temporarily install a service, restoring the previous one on exit."""

    previous = _active_service
    set_active_service(service)
    try:
        yield service
    finally:
        set_active_service(previous)
