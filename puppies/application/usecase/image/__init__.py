"""Image use cases."""

from .get_image import GetImageUseCase
from .list_images import ListImagesUseCase
from .search_puppies import SearchPuppiesRequest, SearchPuppiesUseCase

__all__ = [
    "GetImageUseCase",
    "ListImagesUseCase",
    "SearchPuppiesRequest",
    "SearchPuppiesUseCase",
]
