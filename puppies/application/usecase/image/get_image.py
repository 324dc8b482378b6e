"""Get image use case."""

from puppies.domain.error import NotFoundError
from puppies.domain.model import Image
from puppies.domain.service import ImageService
from puppies.domain.value import ImageId


class GetImageUseCase:
    """Use case for looking up one registered image."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self, image_id: str) -> Image:
        """Return the image with the given id.

        Raises:
            NotFoundError: If no image is registered under the id
        """
        image = self.image_service.find(ImageId(image_id))
        if image is None:
            raise NotFoundError("Image", image_id)
        return image
