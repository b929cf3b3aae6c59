"""Shared test fixtures for the Rapport test suite."""

from collections.abc import Generator

import pytest

from rapport.identity.models import Identity
from rapport.identity.stores.inmemory import InMemoryIdentityDirectory
from rapport.relationship.manager import RelationshipManager
from rapport.relationship.stores.inmemory import InMemoryRelationshipStore
from tests.factories.relationship import IdentityFactory, RecordingListener


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from rapport.config import get_settings
    from rapport.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def alice() -> Identity:
    return IdentityFactory.create("alice")


@pytest.fixture
def bob() -> Identity:
    return IdentityFactory.create("bob")


@pytest.fixture
def carol() -> Identity:
    return IdentityFactory.create("carol")


@pytest.fixture
def dave() -> Identity:
    return IdentityFactory.create("dave")


@pytest.fixture
def relationship_store() -> InMemoryRelationshipStore:
    """Create a fresh relationship store for each test."""
    return InMemoryRelationshipStore()


@pytest.fixture
def identity_directory(alice, bob, carol, dave) -> InMemoryIdentityDirectory:
    """Directory holding four organization identities."""
    return InMemoryIdentityDirectory([alice, bob, carol, dave])


@pytest.fixture
def manager(relationship_store, identity_directory) -> RelationshipManager:
    return RelationshipManager(relationship_store, identity_directory)


@pytest.fixture
def recording_listener() -> RecordingListener:
    return RecordingListener()
