"""Persistence layer errors."""

from typing import Sequence


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StorageUnavailableError(PersistenceError):
    """The vote store could not be opened or created."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Vote store unavailable at {path}: {reason}")


class StorageOperationError(PersistenceError):
    """A statement or transaction against the vote store failed.

    Carries the operation name and the image ids it touched so callers can
    decide between retrying and giving up.
    """

    def __init__(self, operation: str, image_ids: Sequence[str], reason: str):
        self.operation = operation
        self.image_ids = list(image_ids)
        self.reason = reason
        super().__init__(
            f"Vote store operation '{operation}' failed for {len(self.image_ids)} ids: {reason}"
        )
