"""Root conftest — fresh app + async HTTP client per test.

Invariants:
    - Every test gets its own app instance, so the todos list starts empty
    - Clients talk to the app in-process via httpx ASGITransport (no socket)

Design Decisions:
    - Lifespan is not run by ASGITransport: tests never reconfigure root logging
"""

import pytest
from httpx import ASGITransport, AsyncClient

from crud_api.config import Settings
from crud_api.main import create_todos_app, create_users_app


@pytest.fixture
def settings():
    return Settings(log_format="text")


@pytest.fixture
def users_app(settings):
    return create_users_app(settings)


@pytest.fixture
def todos_app(settings):
    return create_todos_app(settings)


@pytest.fixture
async def users_client(users_app):
    async with AsyncClient(
        transport=ASGITransport(app=users_app), base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def todos_client(todos_app):
    async with AsyncClient(
        transport=ASGITransport(app=todos_app), base_url="http://test",
    ) as client:
        yield client
