"""
Seed Demo Data Use Case
=======================

Fills an empty store with demonstration content so the public site is
never blank in demo mode. Works against any repository backend.

Seeding is explicit: nothing is written until ``execute`` is called, and
it does nothing when the store already has users.
"""
import logging
from typing import List

from garden_site.core.security import hash_password
from garden_site.domain.models.blog_post import BlogPost
from garden_site.domain.models.portfolio_item import PortfolioItem
from garden_site.domain.models.service import Service
from garden_site.domain.models.testimonial import Testimonial
from garden_site.domain.models.user import User
from garden_site.domain.repositories.blog_post_repository import BlogPostRepository
from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.domain.repositories.service_repository import ServiceRepository
from garden_site.domain.repositories.testimonial_repository import TestimonialRepository
from garden_site.domain.repositories.user_repository import UserRepository
from garden_site.utils.datetime_utils import parse_iso

logger = logging.getLogger(__name__)

DEMO_ADMIN_PASSWORD = "admin123"

_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Nulla facilisi. "
    "In hac habitasse platea dictumst. Vivamus adipiscing fermentum quam volutpat "
    "aliquam. Integer et elit eget elit facilisis tristique. Nam vel iaculis mauris. "
    "Sed ullamcorper tellus erat, ultrices sem tincidunt euismod."
)


def _demo_services() -> List[Service]:
    return [
        Service(
            name="Garden Maintenance",
            description=(
                "Regular maintenance to keep your garden looking its best year-round. "
                "Includes weeding, pruning, mulching, and seasonal clean-up."
            ),
            short_desc="Regular maintenance to keep your garden healthy and beautiful",
            price="From $120/month",
            featured=True,
        ),
        Service(
            name="Landscape Design",
            description=(
                "Transform your outdoor space with our professional landscape design services. "
                "We create beautiful, sustainable landscapes tailored to your preferences."
            ),
            short_desc="Custom designs to transform your outdoor space",
            price="From $500",
            featured=True,
        ),
        Service(
            name="Tree & Shrub Care",
            description=(
                "Comprehensive care for your trees and shrubs, including pruning, fertilization, "
                "pest management, and disease treatment."
            ),
            short_desc="Healthy growth and longevity for trees and shrubs",
            price="From $150",
            featured=True,
        ),
        Service(
            name="Lawn Care",
            description=(
                "Complete lawn maintenance services including mowing, fertilization, aeration, "
                "overseeding, and pest control."
            ),
            short_desc="Keep your lawn lush, green, and healthy",
            price="From $80/visit",
            featured=False,
        ),
        Service(
            name="Irrigation Systems",
            description=(
                "Design, installation, and maintenance of efficient irrigation systems that "
                "water your garden while conserving water."
            ),
            short_desc="Efficient watering, designed and installed",
            price="From $350",
            featured=False,
        ),
    ]


def _demo_testimonials() -> List[Testimonial]:
    return [
        Testimonial(
            name="Sarah Johnson",
            role="Homeowner",
            content=(
                "Green Garden transformed my backyard into a beautiful oasis! Their team was "
                "professional, responsive, and truly cared about bringing my vision to life."
            ),
            rating=5,
            display_order=1,
        ),
        Testimonial(
            name="Michael Chen",
            role="Business Owner",
            content=(
                "We hired Green Garden to maintain the landscaping at our office building, and "
                "they've exceeded our expectations."
            ),
            rating=5,
            display_order=2,
        ),
        Testimonial(
            name="Emily Rodriguez",
            role="Homeowner",
            content=(
                "The landscape design service was excellent. They listened to our needs, worked "
                "within our budget, and created a sustainable garden that we love."
            ),
            rating=4,
            display_order=3,
        ),
    ]


class SeedDemoDataUseCase:
    """Use case for seeding demonstration records."""

    def __init__(
        self,
        user_repository: UserRepository,
        service_repository: ServiceRepository,
        portfolio_repository: PortfolioRepository,
        blog_post_repository: BlogPostRepository,
        testimonial_repository: TestimonialRepository,
    ):
        self._users = user_repository
        self._services = service_repository
        self._portfolio = portfolio_repository
        self._blog_posts = blog_post_repository
        self._testimonials = testimonial_repository

    async def execute(self) -> bool:
        """
        Execute the seed.

        Returns:
            True if demo data was written, False if the store already had data
        """
        if await self._users.count() > 0:
            logger.info("Store already contains data, skipping seed")
            return False

        logger.info("Seeding demo data...")

        admin = await self._users.create(User(
            username="admin",
            email="admin@greengarden.com",
            password=hash_password(DEMO_ADMIN_PASSWORD),
            name="Admin User",
            role="admin",
        ))

        services = [await self._services.create(service) for service in _demo_services()]
        maintenance = services[0]

        await self._portfolio.create(PortfolioItem(
            title="Residential Garden Renovation",
            description=(
                "Complete transformation of a neglected backyard into a vibrant garden with "
                "native plants, a water feature, and sustainable irrigation."
            ),
            image_url="/images/portfolio/backyard1.jpg",
            service_id=maintenance.id,
            date=parse_iso("2023-04-15"),
            location="Springfield",
            difficulty="Moderate",
            status="Published",
        ))
        await self._portfolio.create(PortfolioItem(
            title="Commercial Landscape Project",
            description=(
                "Designed and implemented landscaping for a corporate campus, featuring "
                "drought-resistant plants and efficient irrigation systems."
            ),
            image_url="/images/portfolio/campus1.jpg",
            service_id=maintenance.id,
            date=parse_iso("2023-05-22"),
            difficulty="Complex",
            status="Published",
        ))

        await self._blog_posts.create(BlogPost(
            title="10 Tips for a Thriving Summer Garden",
            excerpt=(
                "Essential tips to help your garden flourish during the hot summer months, "
                "from watering techniques to pest management."
            ),
            content=_LOREM,
            author_id=admin.id,
            published_at=parse_iso("2023-06-01"),
            image_url="/images/blog/summer-garden.jpg",
        ))
        await self._blog_posts.create(BlogPost(
            title="Sustainable Gardening Practices",
            excerpt=(
                "Learn how to create an eco-friendly garden that conserves water and "
                "supports local wildlife."
            ),
            content=_LOREM,
            author_id=admin.id,
            published_at=parse_iso("2023-05-15"),
            image_url="/images/blog/sustainable.jpg",
        ))

        for testimonial in _demo_testimonials():
            await self._testimonials.create(testimonial)

        logger.info("Demo data seeded")
        return True
