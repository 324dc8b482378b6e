"""Flickr infrastructure providers."""

from dishka import Scope, provide

from puppies.adapter.flickr import FlickrClient, RealFlickrClient
from puppies.config import Settings
from puppies.util.di.base import ProviderBase
from puppies.util.error import ConfigurationError


class FlickrProvider(ProviderBase):
    """Flickr component base."""

    __mock_component__ = "flickr"


class ProdFlickrProvider(FlickrProvider):
    """Production Flickr provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_flickr_client(self, settings: Settings) -> FlickrClient:
        """Provide Flickr client.

        Raises:
            ConfigurationError: If no Flickr API key is configured
        """
        if not settings.flickr.api_key:
            raise ConfigurationError("Flickr API key must be configured")

        return RealFlickrClient(
            api_key=settings.flickr.api_key,
            base_url=settings.flickr.base_url,
            tags=settings.flickr.tags,
            per_page=settings.flickr.per_page,
            timeout=settings.flickr.timeout,
        )
