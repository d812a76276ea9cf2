"""Mock providers for testing."""

from .config import TEST_ADMIN_KEY, MockConfigProvider, make_test_settings
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "TEST_ADMIN_KEY",
    "MockConfigProvider",
    "MockPersistenceProvider",
    "build_test_container",
    "make_test_settings",
]
