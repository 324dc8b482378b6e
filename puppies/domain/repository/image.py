"""Image registry interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from puppies.domain.model.image import Image
from puppies.domain.value import ImageId, SaveResult, Tally, VoteDirection


class ImageRepository(ABC):
    """Registry of vote-augmented images keyed by image id.

    Implementations must make every operation atomic with respect to the
    others; ``update_tally`` is a read-modify-write.
    """

    @abstractmethod
    def save(self, image: Image) -> SaveResult:
        """Register an image unless its id is already present.

        The first image saved under an id wins; later saves with the same id
        leave the stored entry (including its tally) untouched.

        Args:
            image: The image to register

        Returns:
            SaveResult.CREATED if stored, SaveResult.EXISTS if it was a no-op
        """
        pass

    @abstractmethod
    def find_by_id(self, image_id: ImageId) -> Optional[Image]:
        """Find an image by id.

        Args:
            image_id: The image id

        Returns:
            The image if registered, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Image]:
        """Return all registered images in insertion order."""
        pass

    @abstractmethod
    def update_tally(self, image_id: ImageId, direction: VoteDirection) -> Tally:
        """Add one vote to an image's tally.

        Args:
            image_id: The image id
            direction: Which counter to increment

        Returns:
            The tally after the vote

        Raises:
            NotFoundError: If the image is not registered
            VoteLimitError: If the counter is already at MAX_VOTES
        """
        pass

    @abstractmethod
    def restore_tally(self, image_id: ImageId, tally: Tally) -> Optional[Image]:
        """Overwrite an image's tally with previously persisted counts.

        Args:
            image_id: The image id
            tally: The counts to restore

        Returns:
            The updated image, or None if the id is not registered
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of registered images."""
        pass
