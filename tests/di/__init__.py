"""Mock providers for testing."""

from .flickr import MockFlickrProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockFlickrProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
