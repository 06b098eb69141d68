import pytest

from garden_site.application.services.system_service import SystemService
from garden_site.core.config import reset_settings
from garden_site.di.container import DIContainer
from garden_site.di.providers import database_provider
from garden_site.domain.repositories.service_repository import ServiceRepository
from garden_site.infrastructure.db.mongo_service_repository import MongoServiceRepository
from garden_site.infrastructure.memory.memory_repositories import InMemoryServiceRepository


class _FakeMongoClient:
    def __init__(self, database):
        self._database = database

    def get_database(self):
        return self._database

    async def ping(self):
        return True


def test_memory_backend_wiring(container):
    assert isinstance(container.get(ServiceRepository), InMemoryServiceRepository)
    assert not container.has("mongo_client")
    assert container.get(SystemService).storage == "memory"


def test_database_url_selects_mongodb(monkeypatch, mongo_db):
    monkeypatch.setenv("STORAGE_BACKEND", "auto")
    monkeypatch.setenv("DATABASE_URL", "mongodb://localhost:27017")
    monkeypatch.setattr(database_provider, "get_mongo_client", lambda: _FakeMongoClient(mongo_db))
    reset_settings()

    container = DIContainer()

    assert container.has("mongo_client")
    assert isinstance(container.get(ServiceRepository), MongoServiceRepository)
    assert container.get(SystemService).storage == "mongodb"


def test_unregistered_key_raises(container):
    assert not container.has("unknown")
    with pytest.raises(ValueError):
        container.get("unknown")
