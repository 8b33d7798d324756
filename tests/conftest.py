"""Shared test fixtures for the Mente backend tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from mente.db.database import get_mood_collection
from mente.main import app


@pytest.fixture
def mood_events():
    return [
        {"date": "2024-01-01", "mood": "Happy"},
        {"date": "2024-01-01", "mood": "Sad"},
        {"date": "2024-01-08", "mood": "Ecstatic"},
    ]


@pytest.fixture
def mock_collection():
    collection = MagicMock()
    # find() returns a cursor whose sort() is iterated by the store.
    collection.find.return_value.sort.return_value = []
    return collection


@pytest.fixture
def client(mock_collection):
    app.dependency_overrides[get_mood_collection] = lambda: mock_collection
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
