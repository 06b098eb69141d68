# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    CatalogProvider,
    ContentProvider,
    BookingProvider,
    SystemProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider) - MongoDB backend only
    2. Repositories (RepositoryProvider) - in-memory or MongoDB
    3. Services (Catalog, Content, Booking, System) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)

        CatalogProvider.register(self)
        ContentProvider.register(self)
        BookingProvider.register(self)
        SystemProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (tests swap in prepared containers)."""
    global _container
    _container = container


def reset_container() -> None:
    """Drop the global container; the next lookup builds a fresh one."""
    set_container(None)
