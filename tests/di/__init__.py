"""Mock providers for testing."""

from .credential import MockCredentialProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCredentialProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
