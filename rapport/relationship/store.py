"""RelationshipStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from rapport.identity.models import Identity
from rapport.relationship.models import Relationship


class RelationshipStore(ABC):
    """Abstract interface for relationship storage.

    Backends own the durable record and raise PersistenceError when a
    read or write fails. Lookup methods may return None when the backend
    has no record of the identity at all.
    """

    @abstractmethod
    async def get_relationship(self, relationship_id: UUID) -> Relationship | None:
        """Get a relationship by ID."""
        pass

    @abstractmethod
    async def get_relationship_by_identity(
        self, identity: Identity
    ) -> list[Relationship] | None:
        """Get every relationship the identity participates in."""
        pass

    @abstractmethod
    async def get_relationship_by_identity_id(
        self, identity_id: str
    ) -> list[Relationship] | None:
        """Get every relationship the identity with this ID participates in."""
        pass

    @abstractmethod
    async def get_relationship_identities_by_identity(
        self, identity: Identity
    ) -> list[Identity]:
        """Get the counterpart identities across the identity's relationships."""
        pass

    @abstractmethod
    async def save_relationship(self, relationship: Relationship) -> UUID:
        """Save a relationship, returning its ID."""
        pass

    @abstractmethod
    async def remove_relationship(self, relationship: Relationship) -> bool:
        """Delete a relationship."""
        pass
