"""Relationships between identities: models, storage, lifecycle and manager."""

from rapport.relationship.lifecycle import (
    RelationshipEventType,
    RelationshipLifecycle,
    RelationshipListener,
    RelationshipListenerPlugin,
)
from rapport.relationship.manager import RelationshipManager
from rapport.relationship.models import Property, Relationship, RelationshipStatus
from rapport.relationship.store import RelationshipStore

__all__ = [
    "Property",
    "Relationship",
    "RelationshipEventType",
    "RelationshipLifecycle",
    "RelationshipListener",
    "RelationshipListenerPlugin",
    "RelationshipManager",
    "RelationshipStatus",
    "RelationshipStore",
]
