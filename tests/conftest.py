from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from v0_mcp.config import V0Config
from v0_mcp.service import V0Service


@pytest.fixture
def config() -> V0Config:
    return V0Config(api_key="test-key")


@pytest.fixture
def client() -> MagicMock:
    mock = MagicMock()
    mock.chat.completions.create = AsyncMock()
    return mock


@pytest.fixture
def service(client: MagicMock, config: V0Config) -> V0Service:
    return V0Service.from_client(client, config)
