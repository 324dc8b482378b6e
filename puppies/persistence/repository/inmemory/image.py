"""In-memory image registry.

The registry is the only owner of image state for the life of the process.
A single lock guards the whole mapping, so a vote on one id is atomic with
respect to every other registry operation.
"""

from threading import Lock
from typing import Optional

import logfire

from puppies.domain.error import NotFoundError
from puppies.domain.model.image import Image
from puppies.domain.repository.image import ImageRepository
from puppies.domain.value import ImageId, SaveResult, Tally, VoteDirection


class InMemoryImageRepository(ImageRepository):
    """Image registry keyed by id, listing in insertion order."""

    def __init__(self) -> None:
        self._images: dict[ImageId, Image] = {}
        self._lock = Lock()

    def save(self, image: Image) -> SaveResult:
        """Register a copy of the image unless the id is taken."""
        with self._lock:
            if image.id in self._images:
                return SaveResult.EXISTS
            self._images[image.id] = image.model_copy()
            return SaveResult.CREATED

    def find_by_id(self, image_id: ImageId) -> Optional[Image]:
        """Find an image by id."""
        with self._lock:
            return self._images.get(image_id)

    def find_all(self) -> list[Image]:
        """Return a snapshot of every image in insertion order."""
        with self._lock:
            return list(self._images.values())

    def update_tally(self, image_id: ImageId, direction: VoteDirection) -> Tally:
        """Add one vote to the image's tally."""
        with self._lock:
            image = self._images.get(image_id)
            if image is None:
                raise NotFoundError("Image", image_id)

            # Replacing the value keeps the key's insertion position
            tally = image.tally.apply(direction)
            self._images[image_id] = image.with_tally(tally)
            return tally

    def restore_tally(self, image_id: ImageId, tally: Tally) -> Optional[Image]:
        """Overwrite the image's tally with stored counts."""
        with self._lock:
            image = self._images.get(image_id)
            if image is None:
                logfire.debug("Restore skipped for unregistered image", image_id=image_id)
                return None
            restored = image.with_tally(tally)
            self._images[image_id] = restored
            return restored

    def count(self) -> int:
        with self._lock:
            return len(self._images)
