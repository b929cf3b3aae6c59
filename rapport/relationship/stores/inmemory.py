"""In-memory implementation of RelationshipStore."""

from uuid import UUID

from rapport.identity.models import Identity
from rapport.relationship.models import Relationship
from rapport.relationship.store import RelationshipStore


class InMemoryRelationshipStore(RelationshipStore):
    """In-memory implementation of RelationshipStore for testing and development.

    Uses dict storage with linear scan for queries; results come back in
    insertion order. Records are copied on the way in and out so callers
    never share state with the stored record. Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._relationships: dict[UUID, Relationship] = {}

    async def get_relationship(self, relationship_id: UUID) -> Relationship | None:
        """Get a relationship by ID."""
        relationship = self._relationships.get(relationship_id)
        if relationship is None:
            return None
        return relationship.model_copy(deep=True)

    async def get_relationship_by_identity(
        self, identity: Identity
    ) -> list[Relationship] | None:
        """Get every relationship the identity participates in."""
        return await self.get_relationship_by_identity_id(identity.id)

    async def get_relationship_by_identity_id(
        self, identity_id: str
    ) -> list[Relationship] | None:
        """Get every relationship the identity with this ID participates in."""
        return [
            relationship.model_copy(deep=True)
            for relationship in self._relationships.values()
            if relationship.has_participant(identity_id)
        ]

    async def get_relationship_identities_by_identity(
        self, identity: Identity
    ) -> list[Identity]:
        """Get the counterpart identities across the identity's relationships."""
        seen: set[str] = set()
        results = []
        for relationship in self._relationships.values():
            if not relationship.has_participant(identity.id):
                continue
            partner = relationship.get_partner(identity)
            if partner.id in seen:
                continue
            seen.add(partner.id)
            results.append(partner)
        return results

    async def save_relationship(self, relationship: Relationship) -> UUID:
        """Save a relationship, returning its ID."""
        relationship.touch()
        self._relationships[relationship.id] = relationship.model_copy(deep=True)
        return relationship.id

    async def remove_relationship(self, relationship: Relationship) -> bool:
        """Delete a relationship."""
        if relationship.id in self._relationships:
            del self._relationships[relationship.id]
            return True
        return False
