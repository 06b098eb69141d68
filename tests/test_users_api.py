import asyncio

from garden_site.core.security import verify_password
from garden_site.domain.repositories.user_repository import UserRepository


def _create(client, username="staff1", email="staff1@example.com", password="secret123"):
    return client.post("/api/admin/users", json={
        "username": username, "email": email, "password": password, "name": "Staff One",
    })


def test_create_user_hashes_password_201(client, container):
    response = _create(client)
    assert response.status_code == 201
    user = response.json()["user"]
    assert user["role"] == "staff"
    assert "password" not in user

    stored = asyncio.run(container.get(UserRepository).find_by_id(user["id"]))
    assert stored.password != "secret123"
    assert verify_password(stored.password, "secret123")


def test_duplicate_username_400(client):
    _create(client)
    response = _create(client, email="other@example.com")
    assert response.status_code == 400
    assert "staff1" in response.json()["message"]


def test_duplicate_email_400(client):
    _create(client)
    response = _create(client, username="other")
    assert response.status_code == 400


def test_update_password_rehashes_200(client, container):
    user = _create(client).json()["user"]
    response = client.put(f"/api/admin/users/{user['id']}", json={"password": "newsecret"})
    assert response.status_code == 200
    stored = asyncio.run(container.get(UserRepository).find_by_id(user["id"]))
    assert verify_password(stored.password, "newsecret")


def test_update_keeping_own_username_200(client):
    user = _create(client).json()["user"]
    response = client.put(f"/api/admin/users/{user['id']}", json={"username": "staff1", "name": "Renamed"})
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Renamed"


def test_list_and_delete_users(client):
    user = _create(client).json()["user"]
    assert [u["username"] for u in client.get("/api/admin/users").json()["users"]] == ["staff1"]
    assert client.delete(f"/api/admin/users/{user['id']}").status_code == 200
    assert client.get(f"/api/admin/users/{user['id']}").status_code == 404
