"""Relationship stores."""

from rapport.relationship.store import RelationshipStore
from rapport.relationship.stores.inmemory import InMemoryRelationshipStore

__all__ = [
    "RelationshipStore",
    "InMemoryRelationshipStore",
]
