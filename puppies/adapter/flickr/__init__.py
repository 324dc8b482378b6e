"""Flickr adapter."""

from .client import (
    FlickrClient,
    FlickrError,
    MockFlickrClient,
    RealFlickrClient,
    parse_search_response,
)

__all__ = [
    "FlickrClient",
    "FlickrError",
    "MockFlickrClient",
    "RealFlickrClient",
    "parse_search_response",
]
