"""Domain services."""

from .base import Service
from .image_service import ImageService
from .reconcile_service import ReconcileService
from .vote_service import VoteService

__all__ = [
    "ImageService",
    "ReconcileService",
    "Service",
    "VoteService",
]
