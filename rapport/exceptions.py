"""Exception hierarchy for Rapport.

Every error carries a class-level error_code so callers (an API layer, a
job runner) can map failures without inspecting messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable machine-readable error identifiers."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INVALID_RELATIONSHIP = "INVALID_RELATIONSHIP"
    SELF_RELATIONSHIP = "SELF_RELATIONSHIP"
    NON_MEMBER_INITIATOR = "NON_MEMBER_INITIATOR"


class RapportError(Exception):
    """Base exception for all Rapport errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(RapportError):
    """Raised when settings name an unsupported backend or value."""

    error_code = ErrorCode.CONFIGURATION_ERROR


class PersistenceError(RapportError):
    """Raised by store backends when a read or write fails."""

    error_code = ErrorCode.PERSISTENCE_ERROR


class InvalidRelationshipError(RapportError):
    """Raised when a relationship fails validation before persistence."""

    error_code = ErrorCode.INVALID_RELATIONSHIP

    def __init__(self, message: str, relationship_id: str | None = None) -> None:
        super().__init__(message)
        self.relationship_id = relationship_id


class SelfRelationshipError(InvalidRelationshipError):
    """Raised when both sides of a relationship are the same identity."""

    error_code = ErrorCode.SELF_RELATIONSHIP


class NonMemberInitiatorError(InvalidRelationshipError):
    """Raised when a property initiator is not one of the two participants."""

    error_code = ErrorCode.NON_MEMBER_INITIATOR

    def __init__(
        self,
        message: str,
        relationship_id: str | None = None,
        initiator_id: str | None = None,
    ) -> None:
        super().__init__(message, relationship_id=relationship_id)
        self.initiator_id = initiator_id
