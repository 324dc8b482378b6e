"""Reconciliation between the image registry and the vote store."""

from typing import Sequence

import logfire

from puppies.domain.model import Image
from puppies.domain.repository import ImageRepository, VoteRecordRepository
from puppies.domain.value import ImageId, Tally

from .base import Service


class ReconcileService(Service):
    """Flushes registry tallies to the vote store and restores them."""

    def __init__(
        self,
        image_repository: ImageRepository,
        vote_record_repository: VoteRecordRepository,
    ) -> None:
        """Initialize reconcile service.

        Args:
            image_repository: Image registry
            vote_record_repository: Durable vote store
        """
        self.image_repository = image_repository
        self.vote_record_repository = vote_record_repository

    def initialize_schema(self, cold_start: bool) -> None:
        """Prepare the votes table at process start.

        Args:
            cold_start: Recreate the table empty; otherwise keep stored rows
        """
        if cold_start:
            self.vote_record_repository.create_schema()
        else:
            self.vote_record_repository.ensure_schema()

    def flush(self) -> int:
        """Write the tally of every registered image to the vote store.

        Returns:
            Number of rows written

        Raises:
            StorageOperationError: If the transaction fails; nothing is written
        """
        images = self.image_repository.find_all()
        with logfire.span("flush_votes", images=len(images)):
            written = self.vote_record_repository.bulk_insert(images)
            logfire.info("Votes flushed", rows=written)
            return written

    def stored_tallies(self, image_ids: Sequence[ImageId]) -> dict[ImageId, Tally]:
        """Look up stored tallies without touching the registry.

        Args:
            image_ids: Ids to look up

        Returns:
            Tally by id; ids with no stored row are absent

        Raises:
            StorageOperationError: If the lookup fails
        """
        if not image_ids:
            return {}

        records = self.vote_record_repository.load_by_ids(image_ids)
        return {record.image_id: record.tally for record in records}

    def rehydrate(self, image_ids: Sequence[ImageId]) -> list[Image]:
        """Restore stored tallies into the registry.

        Ids without a stored row, or not registered in memory, are skipped.

        Args:
            image_ids: Ids whose tallies should be restored

        Returns:
            The registry entries whose tallies were restored

        Raises:
            StorageOperationError: If the lookup fails
        """
        if not image_ids:
            return []

        with logfire.span("rehydrate_votes", ids=len(image_ids)):
            tallies = self.stored_tallies(image_ids)

            restored: list[Image] = []
            for image_id, tally in tallies.items():
                image = self.image_repository.restore_tally(image_id, tally)
                if image is not None:
                    restored.append(image)

            logfire.info(
                "Votes rehydrated", requested=len(image_ids), restored=len(restored)
            )
            return restored
