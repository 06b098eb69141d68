import asyncio

import pytest

from garden_site.domain.constants.choices import PLACEHOLDER_OBJECT_ID
from garden_site.domain.models.user import User
from garden_site.domain.repositories.user_repository import UserRepository

CONTENT = "A thriving summer garden starts with watering early in the morning."


@pytest.fixture
def admin(container):
    users = container.get(UserRepository)
    return asyncio.run(users.create(User(
        username="admin", email="admin@example.com", password="hash", name="Admin", role="admin",
    )))


def test_create_without_author_defaults_to_admin_201(client, admin):
    response = client.post("/api/admin/blog", json={
        "title": "Summer tips", "content": CONTENT, "excerpt": "Water early and often.",
    })
    assert response.status_code == 201
    post = response.json()["blogPost"]
    assert post["authorId"] == admin.id
    assert post["publishedAt"] is not None


def test_placeholder_author_defaults_to_admin_201(client, admin):
    response = client.post("/api/admin/blog", json={
        "title": "Summer tips", "content": CONTENT, "excerpt": "Water early and often.",
        "authorId": PLACEHOLDER_OBJECT_ID,
    })
    assert response.json()["blogPost"]["authorId"] == admin.id


def test_short_content_and_long_excerpt_400(client):
    response = client.post("/api/admin/blog", json={
        "title": "Too short", "content": "Short", "excerpt": "x" * 151,
    })
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "content" in errors
    assert "excerpt" in errors


def test_public_list_newest_first_200(client, admin):
    for title, date in [("Older", "2023-05-15T00:00:00Z"), ("Newer", "2023-06-01T00:00:00Z")]:
        client.post("/api/admin/blog", json={
            "title": title, "content": CONTENT, "excerpt": "Water early and often.", "publishedAt": date,
        })
    response = client.get("/api/blog")
    assert [p["title"] for p in response.json()["blogPosts"]] == ["Newer", "Older"]


def test_get_update_delete_blog_post(client, admin):
    post = client.post("/api/admin/blog", json={
        "title": "Summer tips", "content": CONTENT, "excerpt": "Water early and often.",
    }).json()["blogPost"]

    assert client.get(f"/api/blog/{post['id']}").json()["blogPost"]["title"] == "Summer tips"
    updated = client.put(f"/api/admin/blog/{post['id']}", json={"title": "Autumn tips"}).json()["blogPost"]
    assert updated["title"] == "Autumn tips"
    assert updated["content"] == CONTENT
    assert client.delete(f"/api/admin/blog/{post['id']}").status_code == 200
    assert client.get(f"/api/blog/{post['id']}").status_code == 404
