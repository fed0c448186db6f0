"""Identity value types: socket addresses, SIDs and GUIDs."""

from audit_logging.identity.models import (
    AddressFamily,
    SecurityIdentifier,
    SocketAddress,
    parse_guid,
)

__all__ = [
    "AddressFamily",
    "SecurityIdentifier",
    "SocketAddress",
    "parse_guid",
]
