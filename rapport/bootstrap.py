"""Build logging, stores, directory and manager from settings.

Callers that already hold a store or directory pass it in; everything
else is created from the configured backend.
"""

import structlog

from rapport.cache.future import InMemoryFutureCache
from rapport.config.models.storage import StoreBackendConfig
from rapport.config.settings import Settings
from rapport.exceptions import ConfigurationError
from rapport.identity.directory import IdentityDirectory
from rapport.identity.stores.inmemory import InMemoryIdentityDirectory
from rapport.observability.logging import get_logger, setup_logging_from_config
from rapport.relationship.manager import RelationshipManager
from rapport.relationship.store import RelationshipStore
from rapport.relationship.stores.inmemory import InMemoryRelationshipStore

logger = get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure structlog from settings and tag every event with app_name."""
    setup_logging_from_config(settings.observability.logging)
    structlog.contextvars.bind_contextvars(app=settings.app_name)


def create_relationship_store(config: StoreBackendConfig) -> RelationshipStore:
    """Create the RelationshipStore for a backend configuration."""
    if config.backend == "inmemory":
        logger.info("relationship_store_initialized", store_type="inmemory")
        return InMemoryRelationshipStore()
    raise ConfigurationError(f"Unsupported relationship store backend: {config.backend}")


def create_identity_directory(config: StoreBackendConfig) -> IdentityDirectory:
    """Create the IdentityDirectory for a backend configuration."""
    if config.backend == "inmemory":
        logger.info("identity_directory_initialized", store_type="inmemory")
        return InMemoryIdentityDirectory()
    raise ConfigurationError(f"Unsupported identity directory backend: {config.backend}")


def create_relationship_manager(
    settings: Settings,
    *,
    store: RelationshipStore | None = None,
    identity_directory: IdentityDirectory | None = None,
) -> RelationshipManager:
    """Create a RelationshipManager wired from settings."""
    return RelationshipManager(
        store or create_relationship_store(settings.storage.relationship),
        identity_directory or create_identity_directory(settings.storage.identity),
        public_provider=settings.relationship.public_provider,
    )


def create_future_cache(settings: Settings) -> InMemoryFutureCache:
    """Create the in-process future cache."""
    return InMemoryFutureCache(max_entries=settings.cache.max_entries)
