"""Test configuration for pytest."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from loco_mcp.clients.loco import LocoClient
from loco_mcp.config import LocoSettings
from loco_mcp.services.loco_service import LocoService

from tests.helpers import TEST_API_BASE


@pytest.fixture
def settings() -> LocoSettings:
    return LocoSettings(api_token="token-123", api_base=TEST_API_BASE)


@pytest.fixture
def session() -> Mock:
    """A fake ``requests.Session``; set ``session.post.return_value`` per test."""
    return Mock()


@pytest.fixture
def service(settings: LocoSettings, session: Mock) -> LocoService:
    return LocoService(LocoClient(settings, session=session))


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use asyncio backend only."""
    return "asyncio"
