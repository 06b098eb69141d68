"""
API v1
======

Routers and the prefixes they are mounted under.
"""
from . import (
    appointments_controller,
    blog_controller,
    inquiries_controller,
    portfolio_controller,
    services_controller,
    status_controller,
    testimonials_controller,
    users_controller,
)

# (router, prefix) pairs; admin routers carry the require_admin guard
ROUTES = [
    (status_controller.router, "/api/status"),
    (services_controller.router, "/api/services"),
    (portfolio_controller.router, "/api/portfolio"),
    (blog_controller.router, "/api/blog"),
    (testimonials_controller.router, "/api/testimonials"),
    (inquiries_controller.contact_router, "/api/contact"),
    (appointments_controller.router, "/api/appointments"),
    (services_controller.admin_router, "/api/admin/services"),
    (portfolio_controller.admin_router, "/api/admin/portfolio"),
    (blog_controller.admin_router, "/api/admin/blog"),
    (testimonials_controller.admin_router, "/api/admin/testimonials"),
    (inquiries_controller.admin_router, "/api/admin/inquiries"),
    (appointments_controller.admin_router, "/api/admin/appointments"),
    (users_controller.admin_router, "/api/admin/users"),
]

__all__ = ["ROUTES"]
