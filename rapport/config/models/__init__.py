"""Configuration model exports.

    from rapport.config.models import StorageConfig, LoggingConfig
"""

from rapport.config.models.cache import CacheConfig
from rapport.config.models.observability import LoggingConfig, ObservabilityConfig
from rapport.config.models.relationship import RelationshipConfig
from rapport.config.models.storage import StorageConfig, StoreBackendConfig

__all__ = [
    "CacheConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "RelationshipConfig",
    "StorageConfig",
    "StoreBackendConfig",
]
