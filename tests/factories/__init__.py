"""Test factories for creating test data."""

from tests.factories.relationship import (
    IdentityFactory,
    RecordingListener,
    RelationshipFactory,
)

__all__ = [
    "IdentityFactory",
    "RecordingListener",
    "RelationshipFactory",
]
