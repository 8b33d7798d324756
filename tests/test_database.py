"""Tests for the lazily created MongoDB client."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from pymongo.errors import ConfigurationError

from mente.db import database


@pytest.fixture
def fake_mongo_client(monkeypatch):
    monkeypatch.setattr(database, "client", None)
    mongo_client = MagicMock()
    monkeypatch.setattr(database, "MongoClient", mongo_client)
    return mongo_client


def test_client_is_created_once(fake_mongo_client):
    database.get_mood_collection()
    database.get_mood_collection()

    fake_mongo_client.assert_called_once_with(
        database.MONGO_URI, serverSelectionTimeoutMS=database.MONGO_TIMEOUT_MS
    )


def test_concurrent_first_calls_share_one_client(fake_mongo_client):
    start = threading.Barrier(8)

    def slow_client(*args, **kwargs):
        time.sleep(0.05)
        return MagicMock()

    fake_mongo_client.side_effect = slow_client

    def first_call():
        start.wait()
        return database.get_database()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: first_call(), range(8)))

    assert fake_mongo_client.call_count == 1
    assert all(result is results[0] for result in results)


def test_client_creation_failure_raises_storage_error(fake_mongo_client):
    fake_mongo_client.side_effect = ConfigurationError("bad uri")

    with pytest.raises(database.StorageError):
        database.get_database()

    assert database.client is None
