"""Flush votes use case."""

from pydantic import BaseModel

from puppies.domain.service import ReconcileService


class FlushVotesResponse(BaseModel):
    """Flush votes response."""

    flushed: int


class FlushVotesUseCase:
    """Use case for writing the registry's tallies to the vote store."""

    def __init__(self, reconcile_service: ReconcileService) -> None:
        self.reconcile_service = reconcile_service

    async def execute(self) -> FlushVotesResponse:
        """Flush every tally.

        Raises:
            StorageOperationError: If the transaction fails
        """
        return FlushVotesResponse(flushed=self.reconcile_service.flush())
