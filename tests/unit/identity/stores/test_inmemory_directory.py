"""Tests for InMemoryIdentityDirectory."""

import pytest

from rapport.identity.stores import InMemoryIdentityDirectory
from tests.factories.relationship import IdentityFactory


class TestIdentityDirectory:
    """Tests for identity lookups."""

    @pytest.mark.asyncio
    async def test_lists_provider_identities_in_order(self, alice, bob):
        """Should list a provider's identities in insertion order."""
        guest = IdentityFactory.create("guest", provider_id="space")
        directory = InMemoryIdentityDirectory([bob, guest, alice])

        assert await directory.get_identities("organization") == [bob, alice]
        assert await directory.get_identities("space") == [guest]
        assert await directory.get_identities("unknown") == []

    @pytest.mark.asyncio
    async def test_save_and_get(self, alice):
        """Should save and retrieve an identity by ID."""
        directory = InMemoryIdentityDirectory()

        identity_id = await directory.save_identity(alice)

        assert identity_id == alice.id
        assert await directory.get_identity(alice.id) == alice
        assert await directory.get_identity("missing") is None
