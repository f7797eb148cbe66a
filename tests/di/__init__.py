"""Mock providers for testing."""

from .persistence import FailingPersistenceProvider, MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FailingPersistenceProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
