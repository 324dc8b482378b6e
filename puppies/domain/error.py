"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteLimitError(DomainError):
    """Raised when a vote would push a counter past what the store can hold."""

    def __init__(self, direction: str, limit: int):
        self.direction = direction
        self.limit = limit
        super().__init__(f"{direction} votes already at the limit of {limit}")
