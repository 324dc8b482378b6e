"""Application layer DI providers."""

from dishka import Scope, provide

from puppies.adapter.flickr import FlickrClient
from puppies.application.usecase.image import (
    GetImageUseCase,
    ListImagesUseCase,
    SearchPuppiesUseCase,
)
from puppies.application.usecase.vote import CastVoteUseCase, FlushVotesUseCase
from puppies.config import Settings
from puppies.domain.service import ImageService, ReconcileService, VoteService
from puppies.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Image use cases
    @provide(scope=Scope.REQUEST)
    def get_search_puppies_use_case(
        self,
        flickr_client: FlickrClient,
        image_service: ImageService,
        reconcile_service: ReconcileService,
        settings: Settings,
    ) -> SearchPuppiesUseCase:
        """Provide search puppies use case."""
        return SearchPuppiesUseCase(
            flickr_client=flickr_client,
            image_service=image_service,
            reconcile_service=reconcile_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_images_use_case(
        self, image_service: ImageService
    ) -> ListImagesUseCase:
        """Provide list images use case."""
        return ListImagesUseCase(image_service=image_service)

    @provide(scope=Scope.REQUEST)
    def get_get_image_use_case(self, image_service: ImageService) -> GetImageUseCase:
        """Provide get image use case."""
        return GetImageUseCase(image_service=image_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_flush_votes_use_case(
        self, reconcile_service: ReconcileService
    ) -> FlushVotesUseCase:
        """Provide flush votes use case."""
        return FlushVotesUseCase(reconcile_service=reconcile_service)
