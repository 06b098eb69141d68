"""pytest configuration: in-memory storage, fresh container per test."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import mongomock
import pytest

# Ensure the project root is available on sys.path so tests can import the app package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["ADMIN_API_TOKEN"] = ""
os.environ["TIMEZONE"] = "UTC"
os.environ.pop("DATABASE_URL", None)

from fastapi.testclient import TestClient  # noqa: E402

from garden_site.core.config import reset_settings  # noqa: E402
from garden_site.di.container import get_container, reset_container  # noqa: E402


class AsyncCursor:
    """Awaitable facade over a mongomock cursor."""

    def __init__(self, cursor):
        self._cursor = cursor

    def sort(self, key, direction=None):
        self._cursor = self._cursor.sort(key, direction)
        return self

    async def to_list(self, length=None):
        docs = list(self._cursor)
        return docs if length is None else docs[:length]


class AsyncCollection:
    """The subset of pymongo's AsyncCollection the repositories use."""

    def __init__(self, collection):
        self._collection = collection

    def find(self, *args, **kwargs):
        return AsyncCursor(self._collection.find(*args, **kwargs))

    async def find_one(self, *args, **kwargs):
        return self._collection.find_one(*args, **kwargs)

    async def insert_one(self, document):
        return self._collection.insert_one(document)

    async def find_one_and_update(self, *args, **kwargs):
        return self._collection.find_one_and_update(*args, **kwargs)

    async def find_one_and_delete(self, *args, **kwargs):
        return self._collection.find_one_and_delete(*args, **kwargs)

    async def delete_many(self, *args, **kwargs):
        return self._collection.delete_many(*args, **kwargs)

    async def count_documents(self, *args, **kwargs):
        return self._collection.count_documents(*args, **kwargs)

    async def create_index(self, *args, **kwargs):
        return self._collection.create_index(*args, **kwargs)


class AsyncDatabase:
    """mongomock database exposed through the async API; ``raw`` is the sync view."""

    def __init__(self, database):
        self.raw = database

    def __getitem__(self, name):
        return AsyncCollection(self.raw[name])

    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture(autouse=True)
def fresh_state():
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()


@pytest.fixture
def mongo_db():
    return AsyncDatabase(mongomock.MongoClient()["garden_services_test"])


@pytest.fixture
def container():
    return get_container()


@pytest.fixture
def client():
    from garden_site.main import app

    with TestClient(app) as test_client:
        yield test_client
