"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class InvalidResponseError(ProviderError):
    """Provider answered, but with data the service cannot use."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"Invalid {provider} response: {reason}")
