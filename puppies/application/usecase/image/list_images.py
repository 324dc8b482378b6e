"""List images use case."""

from puppies.domain.model import Image
from puppies.domain.service import ImageService


class ListImagesUseCase:
    """Use case for listing every registered image."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self) -> list[Image]:
        """Return registered images in insertion order."""
        return self.image_service.all()
