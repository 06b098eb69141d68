import asyncio

import pytest
from fastapi.testclient import TestClient

from garden_site.application.use_cases.seed_demo_data import DEMO_ADMIN_PASSWORD, SeedDemoDataUseCase
from garden_site.core.config import reset_settings
from garden_site.core.security import verify_password
from garden_site.infrastructure import db, memory


def run(coro):
    return asyncio.run(coro)


def _memory_repositories():
    return {
        "user_repository": memory.InMemoryUserRepository(),
        "service_repository": memory.InMemoryServiceRepository(),
        "portfolio_repository": memory.InMemoryPortfolioRepository(),
        "blog_post_repository": memory.InMemoryBlogPostRepository(),
        "testimonial_repository": memory.InMemoryTestimonialRepository(),
    }


def _mongo_repositories(database):
    return {
        "user_repository": db.MongoUserRepository(database),
        "service_repository": db.MongoServiceRepository(database),
        "portfolio_repository": db.MongoPortfolioRepository(database),
        "blog_post_repository": db.MongoBlogPostRepository(database),
        "testimonial_repository": db.MongoTestimonialRepository(database),
    }


@pytest.fixture(params=["memory", "mongodb"])
def repositories(request, mongo_db):
    if request.param == "memory":
        return _memory_repositories()
    return _mongo_repositories(mongo_db)


def test_seed_populates_empty_store(repositories):
    assert run(SeedDemoDataUseCase(**repositories).execute()) is True

    assert run(repositories["user_repository"].count()) == 1
    assert run(repositories["service_repository"].count()) == 5
    assert run(repositories["portfolio_repository"].count()) == 2
    assert run(repositories["blog_post_repository"].count()) == 2
    assert run(repositories["testimonial_repository"].count()) == 3


def test_seed_is_idempotent(repositories):
    use_case = SeedDemoDataUseCase(**repositories)
    run(use_case.execute())
    assert run(use_case.execute()) is False
    assert run(repositories["service_repository"].count()) == 5


def test_seeded_admin_has_hashed_password(repositories):
    run(SeedDemoDataUseCase(**repositories).execute())
    admin = run(repositories["user_repository"].find_by_username("admin"))
    assert admin.is_admin()
    assert admin.password != DEMO_ADMIN_PASSWORD
    assert verify_password(admin.password, DEMO_ADMIN_PASSWORD)


def test_seeded_relations_point_at_seeded_records(repositories):
    run(SeedDemoDataUseCase(**repositories).execute())
    admin = run(repositories["user_repository"].find_first_admin())
    services = run(repositories["service_repository"].find_all())
    maintenance = next(s for s in services if s.name == "Garden Maintenance")

    items = run(repositories["portfolio_repository"].find_by_service(maintenance.id))
    assert len(items) == 2
    assert all(item.is_published() for item in items)

    posts = run(repositories["blog_post_repository"].find_all())
    assert {str(post.author_id) for post in posts} == {str(admin.id)}
    assert posts[0].title == "10 Tips for a Thriving Summer Garden"


def test_seeded_featured_services(repositories):
    run(SeedDemoDataUseCase(**repositories).execute())
    featured = run(repositories["service_repository"].find_featured())
    assert {s.name for s in featured} == {"Garden Maintenance", "Landscape Design", "Tree & Shrub Care"}


def test_startup_seeds_when_enabled(monkeypatch):
    from garden_site.main import app

    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    reset_settings()

    with TestClient(app) as client:
        featured = client.get("/api/services/featured").json()["services"]
        testimonials = client.get("/api/testimonials").json()["testimonials"]

    assert len(featured) == 3
    assert [t["displayOrder"] for t in testimonials] == [1, 2, 3]
