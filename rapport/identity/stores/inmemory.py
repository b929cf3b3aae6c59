"""In-memory implementation of IdentityDirectory."""

from rapport.identity.directory import IdentityDirectory
from rapport.identity.models import Identity


class InMemoryIdentityDirectory(IdentityDirectory):
    """In-memory implementation of IdentityDirectory for testing and development.

    Identities are listed in insertion order. Not suitable for production use.
    """

    def __init__(self, identities: list[Identity] | None = None) -> None:
        self._identities: dict[str, Identity] = {}
        for identity in identities or []:
            self._identities[identity.id] = identity

    async def get_identities(self, provider_id: str) -> list[Identity]:
        """List every identity of a provider."""
        return [
            identity
            for identity in self._identities.values()
            if identity.provider_id == provider_id
        ]

    async def get_identity(self, identity_id: str) -> Identity | None:
        """Get an identity by ID."""
        return self._identities.get(identity_id)

    async def save_identity(self, identity: Identity) -> str:
        """Save an identity, returning its ID."""
        self._identities[identity.id] = identity
        return identity.id
