"""Relationship manager configuration."""

from pydantic import BaseModel, Field


class RelationshipConfig(BaseModel):
    """Settings for RelationshipManager."""

    public_provider: str = Field(
        default="organization",
        min_length=1,
        description="Identity provider listed by get_public_relation",
    )
