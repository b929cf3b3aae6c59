"""IdentityDirectory abstract interface."""

from abc import ABC, abstractmethod

from rapport.identity.models import Identity


class IdentityDirectory(ABC):
    """Abstract interface for the identity directory.

    Lists the identities known to each identity provider. The relationship
    manager receives one through its constructor.
    """

    @abstractmethod
    async def get_identities(self, provider_id: str) -> list[Identity]:
        """List every identity of a provider."""
        pass

    @abstractmethod
    async def get_identity(self, identity_id: str) -> Identity | None:
        """Get an identity by ID."""
        pass

    @abstractmethod
    async def save_identity(self, identity: Identity) -> str:
        """Save an identity, returning its ID."""
        pass
