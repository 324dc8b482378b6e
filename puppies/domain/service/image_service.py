"""Image domain service."""

from typing import Iterable, Mapping, Optional

import logfire

from puppies.domain.model import Image, Photo, PuppiesSummary, SearchResponse
from puppies.domain.repository import ImageRepository
from puppies.domain.value import ImageId, PhotoSize, SaveResult, Tally

from .base import Service


class ImageService(Service):
    """Domain service for building and registering images."""

    def __init__(self, image_repository: ImageRepository) -> None:
        """Initialize image service.

        Args:
            image_repository: Image registry
        """
        self.image_repository = image_repository

    def new_image(self, photo: Photo) -> Image:
        """Build an image with zero votes from a Flickr photo."""
        return Image(
            id=ImageId(photo.id),
            title=photo.title,
            thumbnail=photo.url(PhotoSize.THUMBNAIL),
            large=photo.url(PhotoSize.LARGE),
        )

    def save(self, image: Image) -> SaveResult:
        """Register an image; duplicates are a no-op."""
        result = self.image_repository.save(image)
        if result == SaveResult.EXISTS:
            logfire.debug("Image already registered", image_id=image.id)
        return result

    def unregistered_ids(self, photos: Iterable[Photo]) -> list[ImageId]:
        """Ids of the photos not yet in the registry, first occurrence only."""
        ids: list[ImageId] = []
        for photo in photos:
            image_id = ImageId(photo.id)
            if image_id in ids:
                continue
            if self.image_repository.find_by_id(image_id) is None:
                ids.append(image_id)
        return ids

    def register_photos(
        self,
        photos: Iterable[Photo],
        stored: Optional[Mapping[ImageId, Tally]] = None,
    ) -> list[ImageId]:
        """Register every photo not seen before.

        Args:
            photos: Photos from a search response
            stored: Tallies to start new images from, by id

        Returns:
            Ids of the images created by this call, in input order
        """
        stored = stored or {}
        created: list[ImageId] = []
        for photo in photos:
            image = self.new_image(photo)
            if image.id in stored:
                image = image.with_tally(stored[image.id])
            if self.save(image) == SaveResult.CREATED:
                created.append(image.id)

        logfire.info(
            "Photos registered",
            created=len(created),
            registry_size=self.image_repository.count(),
        )
        return created

    def find(self, image_id: ImageId) -> Optional[Image]:
        """Find a registered image."""
        return self.image_repository.find_by_id(image_id)

    def all(self) -> list[Image]:
        """All registered images in insertion order."""
        return self.image_repository.find_all()

    def summarize(self, search: SearchResponse) -> Optional[PuppiesSummary]:
        """Convert a search response into the summary served to clients.

        The images are the whole registry, not only the photos of this page.

        Args:
            search: Parsed search response

        Returns:
            The summary, or None if any pagination field is not an integer
        """
        try:
            page = int(search.page)
            pages = int(search.pages)
            per_page = int(search.per_page)
            total = int(search.total)
        except ValueError:
            logfire.warn(
                "Search pagination is not numeric",
                page=search.page,
                pages=search.pages,
                per_page=search.per_page,
                total=search.total,
            )
            return None

        return PuppiesSummary(
            page=page,
            pages=pages,
            per_page=per_page,
            total=total,
            images=self.all(),
        )
