"""Mock providers for testing."""

from .identity import MockIdentityAdapterProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityAdapterProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
