"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.domain.repository import PostRepository, UserRepository
from blog.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests of one test
    container. Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
