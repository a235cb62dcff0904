"""Mock providers for testing."""

from .local_store import MockLocalStoreProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockLocalStoreProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
