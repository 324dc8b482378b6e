"""Domain layer DI providers."""

from dishka import Scope, provide

from puppies.domain.repository import ImageRepository, VoteRecordRepository
from puppies.domain.service import ImageService, ReconcileService, VoteService
from puppies.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: they hold no per-request state and all
    share the one image registry.
    """

    scope = Scope.APP

    @provide
    def get_image_service(self, image_repository: ImageRepository) -> ImageService:
        """Provide image domain service."""
        return ImageService(image_repository=image_repository)

    @provide
    def get_vote_service(self, image_repository: ImageRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(image_repository=image_repository)

    @provide
    def get_reconcile_service(
        self,
        image_repository: ImageRepository,
        vote_record_repository: VoteRecordRepository,
    ) -> ReconcileService:
        """Provide reconcile domain service."""
        return ReconcileService(
            image_repository=image_repository,
            vote_record_repository=vote_record_repository,
        )
