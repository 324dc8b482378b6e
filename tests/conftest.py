"""Test configuration and fixtures."""

from puppies.domain.model import Image, Photo
from puppies.domain.value import ImageId


def make_photo(photo_id: str = "8432423659", title: str = "Puppy") -> Photo:
    """Build a Flickr photo record with realistic field values."""
    return Photo(
        id=photo_id,
        owner="37107167@N07",
        secret="dd0ffd9a1d",
        server="8183",
        farm="9",
        title=title,
        is_public="1",
        is_friend="0",
        is_family="0",
    )


def make_image(
    image_id: str, up_votes: int = 0, down_votes: int = 0, title: str = ""
) -> Image:
    """Build an image with the given tally."""
    return Image(
        id=ImageId(image_id),
        title=title or f"Puppy {image_id}",
        thumbnail=f"http://example.com/{image_id}_t.jpg",
        large=f"http://example.com/{image_id}_b.jpg",
        up_votes=up_votes,
        down_votes=down_votes,
    )
