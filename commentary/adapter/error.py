"""Adapter layer errors.

These never leave the adapter layer as-is: domain services translate them
into domain errors (e.g. ``UnauthenticatedError``).
"""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """An external provider rejected or could not complete a call."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class IdentityProviderError(ProviderError):
    """Credentials could not be mapped to a caller."""

    def __init__(self, message: str):
        super().__init__("identity", message)
