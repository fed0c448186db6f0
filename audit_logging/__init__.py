"""Audit logging: typed, fail-safe JSON builder for audit-event records.

Producers (authentication, authorization, file access) assemble event
documents field by field and hand the serialized text to an event
delivery backend.
"""

from audit_logging.builder import (
    DocumentKind,
    JsonDocument,
    add_address,
    add_bool,
    add_guid,
    add_int,
    add_object,
    add_sid,
    add_string,
    add_string_bounded,
    add_timestamp,
    add_version,
    get_array,
    get_object,
    new_array,
    new_object,
    release,
    serialize,
)
from audit_logging.encoding import audit_get_timestamp
from audit_logging.exceptions import (
    AllocationFailure,
    AuditLoggingError,
    SerializationError,
    UnrecognizedAddressFamily,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "AllocationFailure",
    "AuditLoggingError",
    "DocumentKind",
    "JsonDocument",
    "SerializationError",
    "UnrecognizedAddressFamily",
    "add_address",
    "add_bool",
    "add_guid",
    "add_int",
    "add_object",
    "add_sid",
    "add_string",
    "add_string_bounded",
    "add_timestamp",
    "add_version",
    "audit_get_timestamp",
    "get_array",
    "get_object",
    "new_array",
    "new_object",
    "release",
    "serialize",
]
