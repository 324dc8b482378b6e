"""In-memory vote record repository for testing."""

from typing import Sequence

from puppies.domain.model import Image, VoteRecord
from puppies.domain.repository.vote_record import VoteRecordRepository
from puppies.domain.value import ImageId, VoteRecordId


class InMemoryVoteRecordRepository(VoteRecordRepository):
    """In-memory implementation of VoteRecordRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[ImageId, VoteRecord] = {}
        self._next_id = 1

    def create_schema(self) -> None:
        """Clear all records."""
        self._records = {}

    def ensure_schema(self) -> None:
        """Nothing to create in memory."""
        pass

    def bulk_insert(self, images: Sequence[Image]) -> int:
        """Upsert one record per image; all or nothing."""
        staged = dict(self._records)
        next_id = self._next_id
        for image in images:
            existing = staged.get(image.id)
            record_id = existing.id if existing else VoteRecordId(next_id)
            if existing is None:
                next_id += 1
            staged[image.id] = VoteRecord(
                id=record_id,
                image_id=image.id,
                up_votes=image.up_votes,
                down_votes=image.down_votes,
            )

        self._records = staged
        self._next_id = next_id
        return len(images)

    def load_by_ids(self, image_ids: Sequence[ImageId]) -> list[VoteRecord]:
        """Load stored records for the given ids, in insertion order."""
        if not image_ids:
            return []

        wanted = set(image_ids)
        return [r for r in self._records.values() if r.image_id in wanted]
