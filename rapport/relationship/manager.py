"""RelationshipManager: the relationship lifecycle and its queries.

Validates state changes, persists them through a RelationshipStore and
notifies lifecycle listeners. The manager holds no lock; concurrent
changes to the same relationship are resolved by the store.
"""

from uuid import UUID

from rapport.exceptions import NonMemberInitiatorError, SelfRelationshipError
from rapport.identity.directory import IdentityDirectory
from rapport.identity.models import ORGANIZATION_PROVIDER, Identity
from rapport.observability.logging import get_logger
from rapport.relationship.lifecycle import (
    RelationshipLifecycle,
    RelationshipListener,
    RelationshipListenerPlugin,
)
from rapport.relationship.models import Relationship, RelationshipStatus
from rapport.relationship.store import RelationshipStore

logger = get_logger(__name__)


class RelationshipManager:
    """Entry point for inviting, confirming, ignoring and removing connections.

    Every mutating method validates and persists before notifying
    listeners, so listeners only ever see stored state. Store, directory
    and listener errors propagate unchanged.
    """

    def __init__(
        self,
        store: RelationshipStore,
        identity_directory: IdentityDirectory,
        *,
        lifecycle: RelationshipLifecycle | None = None,
        public_provider: str = ORGANIZATION_PROVIDER,
    ) -> None:
        """Initialize the manager.

        Args:
            store: Backend holding relationship records
            identity_directory: Source of identities for get_public_relation
            lifecycle: Listener registry; a fresh one is created if omitted
            public_provider: Identity provider listed by get_public_relation
        """
        self._store = store
        self._identity_directory = identity_directory
        self._lifecycle = lifecycle or RelationshipLifecycle()
        self._public_provider = public_provider

    @property
    def lifecycle(self) -> RelationshipLifecycle:
        return self._lifecycle

    async def get_by_id(self, relationship_id: UUID) -> Relationship | None:
        """Get a relationship by ID."""
        return await self._store.get_relationship(relationship_id)

    # Lifecycle operations

    async def invite(self, inviter: Identity, invitee: Identity) -> Relationship:
        """Create and store a PENDING invitation from inviter to invitee."""
        relationship = self.create(inviter, invitee)
        relationship.status = RelationshipStatus.PENDING
        await self.save(relationship)
        logger.info(
            "relationship_invited",
            relationship_id=str(relationship.id),
            inviter_id=inviter.id,
            invitee_id=invitee.id,
        )
        await self._lifecycle.relationship_requested(self, relationship)
        return relationship

    async def confirm(self, relationship: Relationship) -> None:
        """Mark a relationship and all of its properties as confirmed."""
        self._set_status(relationship, RelationshipStatus.CONFIRM)
        await self.save(relationship)
        logger.info("relationship_confirmed", relationship_id=str(relationship.id))
        await self._lifecycle.relationship_confirmed(self, relationship)

    async def deny(self, relationship: Relationship) -> None:
        """Decline an invitation by deleting the relationship."""
        await self._store.remove_relationship(relationship)
        logger.info("relationship_denied", relationship_id=str(relationship.id))
        await self._lifecycle.relationship_denied(self, relationship)

    async def remove(self, relationship: Relationship) -> None:
        """Delete an existing relationship."""
        await self._store.remove_relationship(relationship)
        logger.info("relationship_removed", relationship_id=str(relationship.id))
        await self._lifecycle.relationship_removed(self, relationship)

    async def ignore(self, relationship: Relationship) -> None:
        """Mark a relationship and all of its properties as ignored."""
        self._set_status(relationship, RelationshipStatus.IGNORE)
        await self.save(relationship)
        logger.info("relationship_ignored", relationship_id=str(relationship.id))
        await self._lifecycle.relationship_ignored(self, relationship)

    def create(self, identity1: Identity, identity2: Identity) -> Relationship:
        """Build an unsaved relationship with no status."""
        return Relationship(identity1=identity1, identity2=identity2)

    async def save(self, relationship: Relationship) -> None:
        """Validate a relationship and hand it to the store.

        Raises:
            SelfRelationshipError: Both sides are the same identity
            NonMemberInitiatorError: A property initiator is not a participant
        """
        relationship_id = str(relationship.id)
        if relationship.identity1.is_same(relationship.identity2):
            logger.warning(
                "relationship_validation_failed",
                relationship_id=relationship_id,
                reason="self_relationship",
            )
            raise SelfRelationshipError(
                "the two identities are the same",
                relationship_id=relationship_id,
            )
        for prop in relationship.properties:
            if not relationship.has_participant(prop.initiator.id):
                logger.warning(
                    "relationship_validation_failed",
                    relationship_id=relationship_id,
                    reason="non_member_initiator",
                    initiator_id=prop.initiator.id,
                )
                raise NonMemberInitiatorError(
                    "the property initiator is not a member of the relationship",
                    relationship_id=relationship_id,
                    initiator_id=prop.initiator.id,
                )
        await self._store.save_relationship(relationship)

    @staticmethod
    def _set_status(relationship: Relationship, status: RelationshipStatus) -> None:
        relationship.status = status
        for prop in relationship.properties:
            prop.status = status

    # Queries

    async def get(self, identity: Identity) -> list[Relationship] | None:
        """Get every relationship, of any status, the identity is part of."""
        return await self._store.get_relationship_by_identity(identity)

    async def get_by_identity_id(self, identity_id: str) -> list[Relationship] | None:
        """Get every relationship the identity with this ID is part of."""
        return await self._store.get_relationship_by_identity_id(identity_id)

    async def get_identities(self, identity: Identity) -> list[Identity]:
        """Get the counterpart identities across all of the identity's relationships."""
        return await self._store.get_relationship_identities_by_identity(identity)

    async def get_contacts(
        self,
        identity: Identity,
        candidates: list[Identity] | None = None,
    ) -> list[Relationship] | None:
        """Get the identity's confirmed relationships.

        Without candidates, returns None when the store has no relationship
        list for the identity. With candidates, keeps the first contact whose
        counterpart has the candidate's remote_id, one per candidate.
        """
        relationships = await self.get(identity)
        if relationships is None:
            return None if candidates is None else []
        contacts = [rel for rel in relationships if rel.status == RelationshipStatus.CONFIRM]
        if candidates is None:
            return contacts

        results = []
        for candidate in candidates:
            for contact in contacts:
                if contact.identity1.remote_id == identity.remote_id:
                    counterpart = contact.identity2
                else:
                    counterpart = contact.identity1
                if counterpart.remote_id == candidate.remote_id:
                    results.append(contact)
                    break
        return results

    async def get_pending(
        self,
        identity: Identity,
        to_confirm: bool | None = None,
        candidates: list[Identity] | None = None,
    ) -> list[Relationship]:
        """Get pending relationships.

        - No to_confirm: relationships that are PENDING or still have a
          PENDING property, sent or received.
        - to_confirm=True: invitations the identity sent that await the
          other side.
        - to_confirm=False: invitations the identity received and must
          answer.
        - With candidates: the above, limited to the first relationship per
          candidate whose other side has the candidate's remote_id.
        """
        if to_confirm is None:
            if candidates is not None:
                raise ValueError("candidates require to_confirm to be set")
            relationships = await self.get(identity) or []
            return [
                rel
                for rel in relationships
                if rel.status == RelationshipStatus.PENDING
                or rel.get_properties(RelationshipStatus.PENDING)
            ]

        if candidates is None:
            wanted = (
                RelationshipStatus.PENDING if to_confirm else RelationshipStatus.REQUIRE_VALIDATION
            )
            relationships = await self.get(identity) or []
            return [
                rel
                for rel in relationships
                if self.get_relationship_status(rel, identity) == wanted
            ]

        pending = await self.get_pending(identity, to_confirm)
        results = []
        for candidate in candidates:
            for rel in pending:
                other = rel.identity2 if to_confirm else rel.identity1
                if other.remote_id == candidate.remote_id:
                    results.append(rel)
                    break
        return results

    async def get_public_relation(self, identity: Identity) -> list[Identity]:
        """Get directory identities with no relationship to `identity`.

        The identity itself is never included.
        """
        all_identities = await self._identity_directory.get_identities(self._public_provider)
        relationships = await self.get(identity) or []
        related_ids = {
            participant.id
            for rel in relationships
            for participant in (rel.identity1, rel.identity2)
        }
        return [
            candidate
            for candidate in all_identities
            if candidate.id != identity.id and candidate.id not in related_ids
        ]

    async def get_relationship(
        self, identity1: Identity, identity2: Identity
    ) -> Relationship | None:
        """Get the first relationship between two identities, if any."""
        relationships = await self.get(identity1) or []
        for rel in relationships:
            if rel.has_participant(identity2.id):
                return rel
        return None

    def get_relationship_status(
        self, relationship: Relationship | None, viewer: Identity
    ) -> RelationshipStatus:
        """Resolve a relationship's status as seen by `viewer`."""
        if relationship is None:
            return RelationshipStatus.ALIEN
        match relationship.status:
            case RelationshipStatus.PENDING:
                if relationship.identity1.is_same(viewer):
                    return RelationshipStatus.PENDING
                return RelationshipStatus.REQUIRE_VALIDATION
            case RelationshipStatus.IGNORE:
                # IGNORE collapses to ALIEN for both sides; a separate ignored
                # state is still an open item.
                return RelationshipStatus.ALIEN
            case _:
                return RelationshipStatus.CONFIRM

    def find_route(self, identity1: Identity, identity2: Identity) -> list[Identity] | None:
        """Find a chain of connections between two identities. Not implemented."""
        return None

    # Listeners

    def register_listener(self, listener: RelationshipListener) -> None:
        if self._lifecycle.add_listener(listener):
            logger.debug("listener_registered", listener=type(listener).__name__)

    def unregister_listener(self, listener: RelationshipListener) -> None:
        if self._lifecycle.remove_listener(listener):
            logger.debug("listener_unregistered", listener=type(listener).__name__)

    def add_listener_plugin(self, plugin: RelationshipListenerPlugin) -> None:
        self.register_listener(plugin)
