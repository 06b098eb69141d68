import asyncio

from fastapi.testclient import TestClient

from garden_site.api.errors import PUBLIC_ERROR_MESSAGE
from garden_site.application.services.catalog_service import CatalogService
from garden_site.application.services.system_service import SystemService


class _PingClient:
    def __init__(self, reachable):
        self.reachable = reachable

    async def ping(self):
        return self.reachable


def test_status_reports_in_memory_storage_200(client):
    response = client.get("/api/status")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "storage": "memory", "database": "in-memory"}


def test_status_reports_mongodb_connectivity():
    up = asyncio.run(SystemService([], _PingClient(True)).status())
    down = asyncio.run(SystemService([], _PingClient(False)).status())
    assert up == {"status": "ok", "storage": "mongodb", "database": "connected"}
    assert down["database"] == "disconnected"


def test_unknown_route_404_uses_message_envelope(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_unexpected_error_500_is_generic(container, monkeypatch):
    from garden_site.main import app

    async def explode(self):
        raise RuntimeError("connection string leaked here")

    monkeypatch.setattr(CatalogService, "list_services", explode)
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/services")

    assert response.status_code == 500
    assert response.json() == {"message": PUBLIC_ERROR_MESSAGE}
