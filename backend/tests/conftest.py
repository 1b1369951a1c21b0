from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from pto_planner.main import app
from pto_planner.schemas.policy import PolicyConfig

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture
def config() -> PolicyConfig:
    """The production policy: 13.34h standard (cap 160), flex 10/8h (48/48/96), 8h workday."""
    return PolicyConfig()


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
