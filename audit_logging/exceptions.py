"""Exception hierarchy for audit record construction and delivery.

All exceptions inherit from AuditLoggingError, which carries the
human-readable message. Builder faults are recorded on the document
rather than raised; only the finalization boundary raises.
"""


class AuditLoggingError(Exception):
    """Base exception for all audit logging errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AllocationFailure(AuditLoggingError):
    """Recorded when a value could not be allocated into a document tree.

    Never raised out of an encoder; the document keeps it as its fault.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class SerializationError(AuditLoggingError):
    """Raised when an errored, released or absorbed document is serialized."""


class UnrecognizedAddressFamily(AuditLoggingError):
    """Raised when a socket address has no canonical text form."""

    def __init__(self, message: str, family: str) -> None:
        super().__init__(message)
        self.family = family


class InvalidIdentifierError(AuditLoggingError, ValueError):
    """Raised when SID or GUID text cannot be parsed."""


class DeliveryError(AuditLoggingError):
    """Raised by delivery backends when the transport rejects a message."""

    def __init__(self, message: str, message_type: str | None = None) -> None:
        super().__init__(message)
        self.message_type = message_type
