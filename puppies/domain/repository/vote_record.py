"""Vote record repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from puppies.domain.model.image import Image
from puppies.domain.model.vote_record import VoteRecord
from puppies.domain.value import ImageId


class VoteRecordRepository(ABC):
    """Durable store of image tallies.

    Implementations raise persistence errors from ``puppies.persistence.error``
    instead of terminating the process.
    """

    @abstractmethod
    def create_schema(self) -> None:
        """Create the votes table if missing and delete all of its rows.

        Raises:
            StorageOperationError: If the statements fail
        """
        pass

    @abstractmethod
    def ensure_schema(self) -> None:
        """Create the votes table if missing, keeping existing rows.

        Raises:
            StorageOperationError: If the statement fails
        """
        pass

    @abstractmethod
    def bulk_insert(self, images: Sequence[Image]) -> int:
        """Write one row per image inside a single transaction.

        Rows already stored for an image id are updated with the current
        tally. Either every row is written or none is.

        Args:
            images: Images whose tallies should be stored

        Returns:
            Number of rows written

        Raises:
            StorageOperationError: If any row fails; nothing is committed
        """
        pass

    @abstractmethod
    def load_by_ids(self, image_ids: Sequence[ImageId]) -> List[VoteRecord]:
        """Load stored tallies for the given image ids.

        An empty id set returns an empty list without querying.

        Args:
            image_ids: Image ids to look up

        Returns:
            Matching records; ids with no stored row are skipped

        Raises:
            StorageOperationError: If the query fails
        """
        pass
