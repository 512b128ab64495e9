"""Shared test fixtures for internal-errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from internal_errors.config import Settings
from tests._helpers import Storage, create_test_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture
def storage() -> Storage:
    return Storage()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, debug=True)


@pytest.fixture
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create test HTTP client."""
    app = create_test_app(test_settings)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac
