"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from juice_bar_api.app.core.events import EventBroker
from juice_bar_api.app.core.store import RecordStore
from juice_bar_api.app.main import create_app
from juice_bar_api.app.services import Catalog


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    """A fresh store holding the demo catalog."""
    return RecordStore.seeded()


@pytest.fixture
def broker():
    return EventBroker()


@pytest.fixture
def catalog(store, broker):
    return Catalog(store, broker)


@pytest.fixture
def app(store, broker):
    return create_app(store=store, broker=broker)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
