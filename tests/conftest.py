"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from chat_hub.app import app
from chat_hub.chat.router import get_stores
from chat_hub.store.registry import Stores, in_memory_stores


@pytest.fixture
def stores() -> Stores:
    """Freshly loaded stores backed by in-memory persistence."""
    stores = in_memory_stores()
    stores.load_all()
    return stores


@pytest.fixture
def client(stores: Stores):
    """TestClient wired to the ``stores`` fixture instead of the lifespan-built stores."""
    app.dependency_overrides[get_stores] = lambda: stores
    yield TestClient(app)
    app.dependency_overrides.clear()
