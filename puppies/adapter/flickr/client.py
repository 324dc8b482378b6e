"""Flickr photo search client.

Calls flickr.photos.search through the REST endpoint and parses the XML
response into domain records.
"""

from abc import ABC, abstractmethod
from xml.etree import ElementTree as ET

import httpx
import logfire

from puppies.adapter.error import ProviderError
from puppies.domain.model import Photo, SearchResponse


class FlickrError(ProviderError):
    """Flickr returned an error or could not be reached."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Flickr error {code}: {message}")


def parse_search_response(xml_text: str) -> SearchResponse:
    """Parse a flickr.photos.search XML response.

    Args:
        xml_text: Body of the REST response

    Returns:
        Search response with pagination kept as strings

    Raises:
        FlickrError: If the body is not XML, reports stat="fail", or has no
            photos element
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FlickrError("parse", str(e)) from e

    if root.get("stat") != "ok":
        err = root.find("err")
        if err is not None:
            raise FlickrError(err.get("code", ""), err.get("msg", ""))
        raise FlickrError("stat", f"unexpected status {root.get('stat')!r}")

    photos = root.find("photos")
    if photos is None:
        raise FlickrError("parse", "response has no photos element")

    return SearchResponse(
        page=photos.get("page", ""),
        pages=photos.get("pages", ""),
        per_page=photos.get("perpage", ""),
        total=photos.get("total", ""),
        photos=[_element_to_photo(el) for el in photos.findall("photo")],
    )


def _element_to_photo(el: ET.Element) -> Photo:
    return Photo(
        id=el.get("id", ""),
        owner=el.get("owner", ""),
        secret=el.get("secret", ""),
        server=el.get("server", ""),
        farm=el.get("farm", ""),
        title=el.get("title", ""),
        is_public=el.get("ispublic", ""),
        is_friend=el.get("isfriend", ""),
        is_family=el.get("isfamily", ""),
        thumbnail_t=el.get("thumbnail_t", ""),
        large_t=el.get("large_t", ""),
    )


class FlickrClient(ABC):
    """Source of photo search results."""

    @abstractmethod
    async def search(self, page: int = 1) -> SearchResponse:
        """Fetch one page of photo search results.

        Raises:
            FlickrError: If the search fails
        """
        pass


class RealFlickrClient(FlickrClient):
    """Flickr REST client using httpx."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        tags: str,
        per_page: int,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Flickr client.

        Args:
            api_key: Flickr API key
            base_url: REST endpoint
            tags: Comma separated search tags
            per_page: Photos per page
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.tags = tags
        self.per_page = per_page
        self.timeout = timeout

    async def search(self, page: int = 1) -> SearchResponse:
        """Search photos tagged with the configured tags."""
        params = {
            "method": "flickr.photos.search",
            "api_key": self.api_key,
            "tags": self.tags,
            "page": str(page),
            "per_page": str(self.per_page),
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.base_url, params=params, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Flickr search HTTP error", error=str(e))
            raise FlickrError("http", str(e)) from e

        if response.status_code != 200:
            logfire.error(
                "Flickr search failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise FlickrError(str(response.status_code), "search request failed")

        result = parse_search_response(response.text)
        logfire.info(
            "Flickr search completed", page=page, photos=len(result.photos)
        )
        return result


class MockFlickrClient(FlickrClient):
    """Mock Flickr client for testing.

    Returns deterministic photos without making real API calls.
    """

    def __init__(self, photo_count: int = 3, pages: int = 5):
        self.photo_count = photo_count
        self.pages = pages

    async def search(self, page: int = 1) -> SearchResponse:
        """Return photos with ids derived from the page number."""
        photos = [
            Photo(
                id=str(page * 100 + i),
                owner="mock@N00",
                secret=f"secret{i}",
                server="1234",
                farm="5",
                title=f"Puppy {page}-{i}",
                is_public="1",
                is_friend="0",
                is_family="0",
            )
            for i in range(1, self.photo_count + 1)
        ]
        return SearchResponse(
            page=str(page),
            pages=str(self.pages),
            per_page=str(self.photo_count),
            total=str(self.pages * self.photo_count),
            photos=photos,
        )
