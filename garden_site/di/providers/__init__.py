"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .catalog_provider import CatalogProvider
from .content_provider import ContentProvider
from .booking_provider import BookingProvider
from .system_provider import SystemProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CatalogProvider",
    "ContentProvider",
    "BookingProvider",
    "SystemProvider",
]
