"""Canonical encodings for audit values."""

from audit_logging.encoding.canonical import (
    format_address,
    format_guid,
    format_iso_timestamp,
    format_sid,
    local_now,
    version_object,
)
from audit_logging.encoding.timestamp import audit_get_timestamp, format_human_timestamp

__all__ = [
    "audit_get_timestamp",
    "format_address",
    "format_guid",
    "format_human_timestamp",
    "format_iso_timestamp",
    "format_sid",
    "local_now",
    "version_object",
]
