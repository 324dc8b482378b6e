"""Flickr photo record.

Photos are read-only input supplied by the Flickr adapter. They are only
used to derive display URLs and the image id.
"""

from puppies.domain.model.common import DomainModel
from puppies.domain.value import PhotoSize

URL_TEMPLATE = "http://farm{farm}.static.flickr.com/{server}/{id}_{secret}{suffix}.jpg"


class Photo(DomainModel):
    """A photo as returned by flickr.photos.search."""

    id: str
    owner: str = ""
    secret: str = ""
    server: str = ""
    farm: str = ""
    title: str = ""
    is_public: str = ""
    is_friend: str = ""
    is_family: str = ""
    thumbnail_t: str = ""
    large_t: str = ""

    def url(self, size: PhotoSize | str) -> str:
        """Return the URL to this photo in the given size.

        The medium-500 size has no suffix. Inputs are not validated.
        """
        code = size.value if isinstance(size, PhotoSize) else size
        suffix = "" if code == PhotoSize.MEDIUM_500.value else f"_{code}"
        return URL_TEMPLATE.format(
            farm=self.farm,
            server=self.server,
            id=self.id,
            secret=self.secret,
            suffix=suffix,
        )
