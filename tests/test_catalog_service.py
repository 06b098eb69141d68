import asyncio

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from garden_site.application.services.catalog_service import CatalogService
from garden_site.domain import models
from garden_site.infrastructure import db, memory


def run(coro):
    return asyncio.run(coro)


@pytest.fixture(params=["memory", "mongodb"])
def repositories(request, mongo_db):
    if request.param == "memory":
        return memory.InMemoryServiceRepository(), memory.InMemoryPortfolioRepository()
    return db.MongoServiceRepository(mongo_db), db.MongoPortfolioRepository(mongo_db)


@pytest.fixture
def catalog(repositories):
    return CatalogService(*repositories)


def _service(name):
    return models.Service(name=name, description="Description", price="$100")


def test_delete_service_cascades_to_portfolio_items(catalog, repositories):
    service_repository, portfolio_repository = repositories
    lawn = run(catalog.create_service(_service("Lawn Care")))
    other = run(catalog.create_service(_service("Irrigation")))
    run(portfolio_repository.create(models.PortfolioItem(title="A", description="D", service_id=lawn.id)))
    run(portfolio_repository.create(models.PortfolioItem(title="B", description="D", service_id=other.id)))
    run(portfolio_repository.create(models.PortfolioItem(title="C", description="D")))

    assert run(catalog.delete_service(lawn.id)) is True

    assert run(catalog.get_service(lawn.id)) is None
    assert run(portfolio_repository.find_by_service(lawn.id)) == []
    assert sorted(i.title for i in run(portfolio_repository.find_all())) == ["B", "C"]


def test_delete_unknown_service_returns_false(catalog, repositories):
    _, portfolio_repository = repositories
    service = run(catalog.create_service(_service("Lawn Care")))
    run(portfolio_repository.create(models.PortfolioItem(title="A", description="D", service_id=service.id)))
    run(catalog.delete_service(service.id))
    assert run(catalog.delete_service(service.id)) is False


def test_reconcile_removes_orphans_left_by_interrupted_cascade(catalog, repositories):
    service_repository, portfolio_repository = repositories
    kept = run(catalog.create_service(_service("Kept")))
    gone = run(catalog.create_service(_service("Gone")))
    run(portfolio_repository.create(models.PortfolioItem(title="Orphan", description="D", service_id=gone.id)))
    run(portfolio_repository.create(models.PortfolioItem(title="Kept", description="D", service_id=kept.id)))
    run(portfolio_repository.create(models.PortfolioItem(title="Unlinked", description="D")))

    # Only the first half of the cascade ran
    run(service_repository.delete(gone.id))

    assert run(catalog.reconcile_portfolio_items()) == 1
    assert sorted(i.title for i in run(portfolio_repository.find_all())) == ["Kept", "Unlinked"]
    assert run(catalog.reconcile_portfolio_items()) == 0


def test_featured_services(catalog):
    run(catalog.create_service(models.Service(name="A", description="D", price="$1", featured=True)))
    run(catalog.create_service(models.Service(name="B", description="D", price="$1")))
    assert [s.name for s in run(catalog.list_featured_services())] == ["A"]


class _UnreachableCollection:
    def find(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("no servers")


def test_reconcile_aborts_when_services_cannot_be_read(mongo_db):
    service_repository = db.MongoServiceRepository(mongo_db)
    portfolio_repository = db.MongoPortfolioRepository(mongo_db)
    service = run(service_repository.create(_service("Lawn Care")))
    run(portfolio_repository.create(models.PortfolioItem(title="A", description="D", service_id=service.id)))

    unreachable = db.MongoServiceRepository({"services": _UnreachableCollection()})
    catalog = CatalogService(unreachable, portfolio_repository)

    with pytest.raises(ServerSelectionTimeoutError):
        run(catalog.reconcile_portfolio_items())
    assert [i.title for i in run(portfolio_repository.find_all())] == ["A"]
