"""Infrastructure providers."""

# Import bases
from .flickr import FlickrProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .flickr import ProdFlickrProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FlickrProvider",
    "PersistenceProvider",
    "ProdFlickrProvider",
    "ProdPersistenceProvider",
]
