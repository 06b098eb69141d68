import asyncio

import pytest

from garden_site.domain import models
from garden_site.infrastructure.memory import memory_repositories as repos
from garden_site.utils.datetime_utils import parse_iso


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def services():
    return repos.InMemoryServiceRepository()


@pytest.fixture
def portfolio():
    return repos.InMemoryPortfolioRepository()


def _service(name="Lawn Care", featured=False):
    return models.Service(name=name, description="Mowing and edging", price="From $80/visit", featured=featured)


def test_create_assigns_sequential_ids(services):
    first = run(services.create(_service("A")))
    second = run(services.create(_service("B")))
    assert (first.id, second.id) == (1, 2)


def test_create_then_get_returns_input_with_defaults(services):
    created = run(services.create(models.Service(name="Lawn Care", description="d", price="$80")))
    fetched = run(services.find_by_id(created.id))
    assert fetched == created
    assert fetched.featured is False
    assert fetched.short_desc is None


def test_get_accepts_numeric_string_ids(services):
    created = run(services.create(_service()))
    assert run(services.find_by_id(str(created.id))).name == "Lawn Care"


def test_get_unknown_or_malformed_id_returns_none(services):
    run(services.create(_service()))
    assert run(services.find_by_id(99)) is None
    assert run(services.find_by_id("507f1f77bcf86cd799439011")) is None
    assert run(services.find_by_id("garbage")) is None


def test_delete_then_get_is_absent_and_second_delete_false(services):
    created = run(services.create(_service()))
    assert run(services.delete(created.id)) is True
    assert run(services.find_by_id(created.id)) is None
    assert run(services.delete(created.id)) is False


def test_update_keeps_unspecified_fields(services):
    created = run(services.create(models.Service(
        name="Lawn Care", description="Mowing", price="$80", short_desc="Short", featured=True,
    )))
    updated = run(services.update(created.id, {"price": "$90"}))
    assert updated.price == "$90"
    assert updated.name == "Lawn Care"
    assert updated.short_desc == "Short"
    assert updated.featured is True
    assert updated.updated_at >= created.updated_at


def test_update_never_changes_id(services):
    created = run(services.create(_service()))
    updated = run(services.update(created.id, {"id": 42, "name": "Renamed"}))
    assert updated.id == created.id
    assert run(services.find_by_id(42)) is None


def test_update_unknown_id_returns_none(services):
    assert run(services.update(5, {"name": "x"})) is None


def test_returned_entities_are_copies(services):
    created = run(services.create(_service()))
    created.name = "Mutated"
    assert run(services.find_by_id(created.id)).name == "Lawn Care"


def test_featured_is_subset_of_all(services):
    run(services.create(_service("A", featured=True)))
    run(services.create(_service("B", featured=False)))
    run(services.create(_service("C", featured=True)))
    featured = run(services.find_featured())
    all_services = run(services.find_all())
    assert [s.name for s in featured] == ["A", "C"]
    assert [s.id for s in featured] == [s.id for s in all_services if s.featured]


def test_portfolio_service_id_string_and_int_agree(portfolio):
    run(portfolio.create(models.PortfolioItem(title="T", description="D", service_id="3")))
    assert len(run(portfolio.find_by_service(3))) == 1
    assert len(run(portfolio.find_by_service("3"))) == 1


def test_portfolio_invalid_service_id_raises(portfolio):
    with pytest.raises(ValueError):
        run(portfolio.create(models.PortfolioItem(title="T", description="D", service_id="abc")))


def test_delete_by_service_removes_only_matching_items(portfolio):
    run(portfolio.create(models.PortfolioItem(title="A", description="D", service_id=1)))
    run(portfolio.create(models.PortfolioItem(title="B", description="D", service_id=1)))
    run(portfolio.create(models.PortfolioItem(title="C", description="D", service_id=2)))
    assert run(portfolio.delete_by_service(1)) == 2
    assert run(portfolio.find_by_service(1)) == []
    assert [i.title for i in run(portfolio.find_all())] == ["C"]


def test_increment_view_count(portfolio):
    item = run(portfolio.create(models.PortfolioItem(title="A", description="D")))
    run(portfolio.increment_view_count(item.id))
    assert run(portfolio.increment_view_count(item.id)).view_count == 2
    assert run(portfolio.increment_view_count(999)) is None


def test_blog_posts_sorted_newest_first():
    posts = repos.InMemoryBlogPostRepository()
    for title, date in [("old", "2023-01-01"), ("new", "2023-06-01"), ("mid", "2023-03-01")]:
        run(posts.create(models.BlogPost(
            title=title, content="c" * 30, excerpt="excerpt text", published_at=parse_iso(date),
        )))
    assert [p.title for p in run(posts.find_all())] == ["new", "mid", "old"]


def test_appointments_sorted_by_date_ascending():
    appointments = repos.InMemoryAppointmentRepository()
    for name, date in [("late", "2030-05-03T10:00:00Z"), ("early", "2030-05-01T10:00:00Z")]:
        run(appointments.create(models.Appointment(
            name=name, email="a@b.com", phone="5550000000", service_id=1, date=parse_iso(date),
        )))
    assert [a.name for a in run(appointments.find_all())] == ["early", "late"]


def test_testimonials_sorted_by_display_order():
    testimonials = repos.InMemoryTestimonialRepository()
    for name, order in [("third", 3), ("first", 1), ("second", 2)]:
        run(testimonials.create(models.Testimonial(name=name, content="Great", display_order=order)))
    assert [t.name for t in run(testimonials.find_all())] == ["first", "second", "third"]


def test_each_repository_has_its_own_counter():
    users = repos.InMemoryUserRepository()
    testimonials = repos.InMemoryTestimonialRepository()
    user = run(users.create(models.User(username="u", email="u@x.com", password="h", name="U")))
    testimonial = run(testimonials.create(models.Testimonial(name="T", content="C")))
    assert user.id == testimonial.id == 1


def test_find_user_by_username_and_email():
    users = repos.InMemoryUserRepository()
    run(users.create(models.User(username="staff", email="s@x.com", password="h", name="S")))
    run(users.create(models.User(username="boss", email="b@x.com", password="h", name="B", role="admin")))
    assert run(users.find_by_username("staff")).email == "s@x.com"
    assert run(users.find_by_email("b@x.com")).username == "boss"
    assert run(users.find_first_admin()).username == "boss"
    assert run(users.find_by_username("nobody")) is None


def test_list_ids_follows_deletes(services):
    first = run(services.create(_service("A")))
    second = run(services.create(_service("B")))
    run(services.delete(first.id))
    assert run(services.list_ids()) == [second.id]


def test_returned_items_do_not_share_nested_records_with_store(portfolio):
    created = run(portfolio.create(models.PortfolioItem(
        title="T",
        description="D",
        images=[models.ImagePair(before="b.jpg", after="a.jpg")],
        seo=models.SeoMetadata(tags=["lawn"]),
    )))

    fetched = run(portfolio.find_by_id(created.id))
    fetched.images.append(models.ImagePair(before="x.jpg", after="y.jpg"))
    fetched.seo.tags.append("leaked")
    created.images[0].caption = "changed"
    run(portfolio.find_all())[0].seo.tags.clear()

    stored = run(portfolio.find_by_id(created.id))
    assert len(stored.images) == 1
    assert stored.images[0].caption is None
    assert stored.seo.tags == ["lawn"]
