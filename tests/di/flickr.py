"""Mock Flickr providers for testing."""

from dishka import Scope, provide

from puppies.adapter.flickr import FlickrClient, MockFlickrClient
from puppies.util.di.infrastructure.flickr import FlickrProvider


class MockFlickrProvider(FlickrProvider):
    """Mock Flickr provider returning deterministic photos."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_flickr_client(self) -> FlickrClient:
        """Provide mock Flickr client."""
        return MockFlickrClient()
