"""Photo search result and the summary served to clients."""

from pydantic import Field

from puppies.domain.model.common import DomainModel
from puppies.domain.model.image import Image
from puppies.domain.model.photo import Photo


class SearchResponse(DomainModel):
    """Parsed flickr.photos.search result.

    Pagination fields are kept as the strings Flickr sent.
    """

    page: str = ""
    pages: str = ""
    per_page: str = ""
    total: str = ""
    photos: list[Photo] = Field(default_factory=list)


class PuppiesSummary(DomainModel):
    """Pagination echoed from the search plus every registered image."""

    page: int
    pages: int
    per_page: int = Field(serialization_alias="perpage")
    total: int
    images: list[Image] = Field(default_factory=list)
