"""Search puppies use case."""

import logfire
from pydantic import BaseModel, Field

from puppies.adapter.error import InvalidResponseError
from puppies.adapter.flickr import FlickrClient
from puppies.config import Settings
from puppies.domain.model import PuppiesSummary
from puppies.domain.service import ImageService, ReconcileService


class SearchPuppiesRequest(BaseModel):
    """Search puppies request."""

    page: int = Field(default=1, ge=1)


class SearchPuppiesUseCase:
    """Fetch a page of photos, register them and summarize the registry."""

    def __init__(
        self,
        flickr_client: FlickrClient,
        image_service: ImageService,
        reconcile_service: ReconcileService,
        settings: Settings,
    ) -> None:
        """Initialize search puppies use case.

        Args:
            flickr_client: Photo search client
            image_service: Image domain service
            reconcile_service: Registry/vote store reconciliation
            settings: Application settings
        """
        self.flickr_client = flickr_client
        self.image_service = image_service
        self.reconcile_service = reconcile_service
        self.settings = settings

    async def execute(self, request: SearchPuppiesRequest) -> PuppiesSummary:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            Pagination of the search plus every registered image

        Raises:
            FlickrError: If the search fails
            StorageOperationError: If stored tallies cannot be loaded
            InvalidResponseError: If the search pagination is not numeric
        """
        search = await self.flickr_client.search(page=request.page)

        # Stored tallies are loaded before registering, so a failed lookup
        # leaves the registry untouched and the next search retries it
        stored = {}
        new_ids = self.image_service.unregistered_ids(search.photos)
        if new_ids and self.settings.persistence.rehydrate_on_search:
            stored = self.reconcile_service.stored_tallies(new_ids)

        self.image_service.register_photos(search.photos, stored)

        summary = self.image_service.summarize(search)
        if summary is None:
            logfire.warn("Search response could not be summarized", page=request.page)
            raise InvalidResponseError("Flickr", "non-numeric pagination")

        return summary
