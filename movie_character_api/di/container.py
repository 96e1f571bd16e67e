from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    MapperProvider,
    RepositoryProvider,
    ServiceProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database engine and session factory (DatabaseProvider)
    2. Repositories (RepositoryProvider) - built per request around a session
    3. Mapper (MapperProvider) - one per process
    4. Services (ServiceProvider) - built per request from repositories
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        super().__init__()
        self.database_url = database_url
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database -> repositories -> mapper -> services
        """
        DatabaseProvider.register(self, self.database_url)
        RepositoryProvider.register(self)
        MapperProvider.register(self)
        ServiceProvider.register(self)

    def dispose(self) -> None:
        """Release pooled database connections."""
        self.get("engine").dispose()


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
