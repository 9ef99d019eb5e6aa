"""Service test fixtures — fake store + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeTaskStore seeded with two tasks
    - app.state.task_store_factory swapped to return that store, and counts builds
    - The original factory restored after each test

Design Decisions:
    - Swap the factory, not the client class: route code runs unchanged
"""

import pytest
from httpx import ASGITransport, AsyncClient

from restful_tasks.main import app

from tests.services.fake_store import FakeTaskStore


SEED_TASKS = [
    {"id": 1, "name": "write report", "status": 0},
    {"id": 2, "name": "review PR", "status": 1},
]


@pytest.fixture
def store():
    return FakeTaskStore(SEED_TASKS)


@pytest.fixture
async def client(store):
    """FastAPI test client whose requests all reach the fake store."""
    original_factory = app.state.task_store_factory

    def fake_factory(request, settings):
        store.builds += 1
        return store

    app.state.task_store_factory = fake_factory

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.task_store_factory = original_factory
