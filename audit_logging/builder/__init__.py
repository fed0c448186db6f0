"""Document builder and typed field encoders for audit records.

Usage:
    from audit_logging.builder import add_string, add_timestamp, new_object, serialize

    with new_object() as event:
        add_timestamp(event)
        add_string(event, "status", "NT_STATUS_OK")
        text = serialize(event)
"""

from audit_logging.builder.document import (
    DocumentKind,
    JsonDocument,
    JsonValue,
    get_array,
    get_object,
    new_array,
    new_object,
    release,
    serialize,
)
from audit_logging.builder.encoders import (
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
    truncate_utf8,
)

__all__ = [
    "DocumentKind",
    "JsonDocument",
    "JsonValue",
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
    "get_array",
    "get_object",
    "new_array",
    "new_object",
    "release",
    "serialize",
    "truncate_utf8",
]
