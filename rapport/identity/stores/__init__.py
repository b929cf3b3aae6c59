"""Identity directory backends."""

from rapport.identity.directory import IdentityDirectory
from rapport.identity.stores.inmemory import InMemoryIdentityDirectory

__all__ = [
    "IdentityDirectory",
    "InMemoryIdentityDirectory",
]
