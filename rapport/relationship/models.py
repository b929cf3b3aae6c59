"""Relationship domain models."""

from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rapport.identity.models import Identity


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class RelationshipStatus(str, Enum):
    """Relationship states.

    - PENDING: Invitation sent, awaiting the invitee
    - CONFIRM: Both sides are connected
    - IGNORE: The invitee ignored the invitation
    - ALIEN: Viewer has no usable relationship (never stored)
    - REQUIRE_VALIDATION: Viewer is the invitee of a pending
      relationship (never stored)
    """

    PENDING = "pending"
    CONFIRM = "confirm"
    IGNORE = "ignore"
    ALIEN = "alien"
    REQUIRE_VALIDATION = "require_validation"

    @property
    def is_persistable(self) -> bool:
        """Whether the status may be stored on a relationship record."""
        return self in PERSISTABLE_STATUSES


PERSISTABLE_STATUSES: frozenset[RelationshipStatus] = frozenset({
    RelationshipStatus.PENDING,
    RelationshipStatus.CONFIRM,
    RelationshipStatus.IGNORE,
})


def _check_persistable(status: RelationshipStatus | None) -> RelationshipStatus | None:
    if status is not None and not status.is_persistable:
        raise ValueError(f"'{status.value}' is a viewer-relative status and cannot be stored")
    return status


class Property(BaseModel):
    """One facet of a relationship, such as a single invitation context."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    initiator: Identity = Field(..., description="Identity that opened this facet")
    status: RelationshipStatus | None = Field(default=None, description="Facet status")
    name: str | None = Field(default=None, description="Context label")

    @field_validator("status")
    @classmethod
    def status_is_persistable(cls, v: RelationshipStatus | None) -> RelationshipStatus | None:
        return _check_persistable(v)


class Relationship(BaseModel):
    """A social link between two identities.

    The pair is directional: for a PENDING relationship identity1 is the
    inviter and identity2 the invitee.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    identity1: Identity = Field(..., description="First participant (inviter)")
    identity2: Identity = Field(..., description="Second participant (invitee)")
    status: RelationshipStatus | None = Field(default=None, description="Relationship status")
    properties: list[Property] = Field(default_factory=list, description="Relationship facets")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last modification timestamp")

    @field_validator("status")
    @classmethod
    def status_is_persistable(cls, v: RelationshipStatus | None) -> RelationshipStatus | None:
        return _check_persistable(v)

    def get_properties(self, status: RelationshipStatus | None = None) -> list[Property]:
        """Get properties, optionally only those with the given status."""
        if status is None:
            return list(self.properties)
        return [prop for prop in self.properties if prop.status == status]

    def add_property(self, prop: Property) -> None:
        """Attach a property. Initiator membership is checked on save."""
        self.properties.append(prop)

    def has_participant(self, identity_id: str) -> bool:
        """Check if the identity with this ID is one of the two sides."""
        return identity_id in (self.identity1.id, self.identity2.id)

    def get_partner(self, identity: Identity) -> Identity:
        """Return the side opposite to `identity`."""
        if self.identity1.is_same(identity):
            return self.identity2
        return self.identity1

    def touch(self) -> None:
        """Update the updated_at timestamp to current time."""
        self.updated_at = utc_now()
