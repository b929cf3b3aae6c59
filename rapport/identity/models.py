"""Identity model."""

from pydantic import BaseModel, ConfigDict, Field

ORGANIZATION_PROVIDER = "organization"


class Identity(BaseModel):
    """A user or profile reference.

    `id` is unique across providers; `remote_id` is unique only within
    `provider_id` (for the organization provider it is the user name).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    provider_id: str = Field(
        default=ORGANIZATION_PROVIDER,
        description="Identity provider name",
    )
    remote_id: str = Field(..., min_length=1, description="Provider-scoped identifier")

    def is_same(self, other: "Identity | None") -> bool:
        """Check whether `other` refers to the same identity by id."""
        return other is not None and self.id == other.id
