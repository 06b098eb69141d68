import pytest

from garden_site.core.config import reset_settings


@pytest.fixture
def admin_token(monkeypatch):
    monkeypatch.setenv("ADMIN_API_TOKEN", "s3cret")
    reset_settings()
    return "s3cret"


def test_admin_routes_open_without_configured_token_200(client):
    assert client.get("/api/admin/services").status_code == 200


def test_missing_token_401(client, admin_token):
    response = client.get("/api/admin/services")
    assert response.status_code == 401
    assert response.json() == {"message": "Admin authentication required"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_wrong_token_401(client, admin_token):
    response = client.get("/api/admin/inquiries", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_valid_token_200(client, admin_token):
    response = client.get("/api/admin/users", headers={"Authorization": f"Bearer {admin_token}"})
    assert response.status_code == 200


def test_public_routes_need_no_token_200(client, admin_token):
    assert client.get("/api/services").status_code == 200
    assert client.get("/api/status").status_code == 200
