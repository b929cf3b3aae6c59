"""Identity models and directory."""

from rapport.identity.directory import IdentityDirectory
from rapport.identity.models import ORGANIZATION_PROVIDER, Identity

__all__ = [
    "ORGANIZATION_PROVIDER",
    "Identity",
    "IdentityDirectory",
]
