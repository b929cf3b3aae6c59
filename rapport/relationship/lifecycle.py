"""Relationship lifecycle listeners and their registry.

RelationshipManager drives a RelationshipLifecycle after every successful
state change. Dispatch awaits each listener in registration order; a
listener that raises stops the remaining notifications and the error
reaches the caller of the manager method.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from rapport.observability.logging import get_logger
from rapport.relationship.models import Relationship

if TYPE_CHECKING:
    from rapport.relationship.manager import RelationshipManager

logger = get_logger(__name__)


class RelationshipEventType(str, Enum):
    """Lifecycle events emitted by RelationshipManager."""

    REQUESTED = "requested"
    CONFIRMED = "confirmed"
    DENIED = "denied"
    REMOVED = "removed"
    IGNORED = "ignored"


class RelationshipListener(ABC):
    """Receives relationship lifecycle events."""

    @abstractmethod
    async def on_requested(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        """Called after an invitation is stored."""
        pass

    @abstractmethod
    async def on_confirmed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        """Called after a relationship is confirmed."""
        pass

    @abstractmethod
    async def on_denied(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        """Called after an invitation is declined and deleted."""
        pass

    @abstractmethod
    async def on_removed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        """Called after an existing relationship is deleted."""
        pass

    @abstractmethod
    async def on_ignored(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        """Called after an invitation is ignored."""
        pass


class RelationshipListenerPlugin(RelationshipListener):
    """Configurable listener base with no-op callbacks.

    Subclasses override only the events they care about and are
    registered through RelationshipManager.add_listener_plugin.
    """

    def __init__(self, name: str | None = None, description: str = "") -> None:
        self.name = name or type(self).__name__
        self.description = description

    async def on_requested(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        pass

    async def on_confirmed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        pass

    async def on_denied(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        pass

    async def on_removed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        pass

    async def on_ignored(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        pass


_CALLBACKS: dict[RelationshipEventType, str] = {
    RelationshipEventType.REQUESTED: "on_requested",
    RelationshipEventType.CONFIRMED: "on_confirmed",
    RelationshipEventType.DENIED: "on_denied",
    RelationshipEventType.REMOVED: "on_removed",
    RelationshipEventType.IGNORED: "on_ignored",
}


class RelationshipLifecycle:
    """Ordered registry of relationship listeners.

    A listener object is registered at most once; registering it again
    keeps its original position. The registry is not guarded by a lock.
    """

    def __init__(self) -> None:
        self._listeners: list[RelationshipListener] = []

    @property
    def listeners(self) -> tuple[RelationshipListener, ...]:
        """Registered listeners in dispatch order."""
        return tuple(self._listeners)

    def add_listener(self, listener: RelationshipListener) -> bool:
        """Register a listener. Returns False if it was already registered."""
        if any(existing is listener for existing in self._listeners):
            return False
        self._listeners.append(listener)
        return True

    def remove_listener(self, listener: RelationshipListener) -> bool:
        """Unregister a listener. Returns False if it was not registered."""
        for index, existing in enumerate(self._listeners):
            if existing is listener:
                del self._listeners[index]
                return True
        return False

    async def dispatch(
        self,
        event: RelationshipEventType,
        manager: "RelationshipManager",
        relationship: Relationship,
    ) -> None:
        """Notify every listener of an event, in registration order.

        Iterates over a snapshot, so registry changes made by a listener
        apply from the next event.
        """
        callback = _CALLBACKS[event]
        listeners = tuple(self._listeners)
        for listener in listeners:
            await getattr(listener, callback)(manager, relationship)
        logger.debug(
            "relationship_event_dispatched",
            event_type=event.value,
            relationship_id=str(relationship.id),
            listener_count=len(listeners),
        )

    async def relationship_requested(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        await self.dispatch(RelationshipEventType.REQUESTED, manager, relationship)

    async def relationship_confirmed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        await self.dispatch(RelationshipEventType.CONFIRMED, manager, relationship)

    async def relationship_denied(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        await self.dispatch(RelationshipEventType.DENIED, manager, relationship)

    async def relationship_removed(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        await self.dispatch(RelationshipEventType.REMOVED, manager, relationship)

    async def relationship_ignored(
        self, manager: "RelationshipManager", relationship: Relationship
    ) -> None:
        await self.dispatch(RelationshipEventType.IGNORED, manager, relationship)
