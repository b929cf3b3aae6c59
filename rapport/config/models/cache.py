"""Future cache configuration."""

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    """Settings for the in-memory future cache."""

    max_entries: int = Field(
        default=1000,
        gt=0,
        description="Maximum cached values before oldest-first eviction",
    )
