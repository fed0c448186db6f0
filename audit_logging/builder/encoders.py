"""Typed field encoders for audit documents.

Every encoder takes ``(doc, key, value)``, converts the value into a
JSON leaf or subtree and inserts it. ``None`` always means "no value"
and becomes JSON ``null``. On an array root the key is discarded and
the value is appended. Encoders never raise; faults are recorded on
the document and surface at ``serialize``.
"""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from audit_logging.builder.document import JsonDocument
from audit_logging.encoding.canonical import (
    format_address,
    format_guid,
    format_iso_timestamp,
    format_sid,
    version_object,
)
from audit_logging.exceptions import AllocationFailure, AuditLoggingError, UnrecognizedAddressFamily
from audit_logging.identity.models import SecurityIdentifier, SocketAddress
from audit_logging.observability.logging import get_logger

logger = get_logger(__name__)

TIMESTAMP_KEY = "timestamp"
VERSION_KEY = "version"


def _add(
    doc: JsonDocument,
    key: str | None,
    encoder: str,
    build: Callable[[], Any],
) -> None:
    """Build a value and insert it, recording build faults on ``doc``."""
    if not doc.is_usable:
        logger.debug("audit_encoder_skipped", encoder=encoder, key=key)
        return
    try:
        value = build()
    except MemoryError:
        doc.mark_error(
            AllocationFailure(f"Unable to allocate {encoder} value [{key}]", key=key),
            source=encoder,
        )
        return
    except (TypeError, ValueError, OverflowError) as exc:
        doc.mark_error(
            AuditLoggingError(f"Unable to encode {encoder} value [{key}]: {exc}"),
            source=encoder,
        )
        return
    doc.insert(key, value, source=encoder)


def add_int(doc: JsonDocument, key: str | None, value: int) -> None:
    """Add an integer field."""
    _add(doc, key, "add_int", lambda: int(value))


def add_bool(doc: JsonDocument, key: str | None, value: bool) -> None:
    """Add a boolean field."""
    _add(doc, key, "add_bool", lambda: bool(value))


def add_string(doc: JsonDocument, key: str | None, value: str | None) -> None:
    """Add a string field; ``None`` becomes ``null``."""
    _add(doc, key, "add_string", lambda: value)


def truncate_utf8(value: str, max_len: int) -> str:
    """Return the longest prefix of ``value`` that fits in ``max_len`` UTF-8 bytes.

    ASCII text is cut at exactly ``max_len`` bytes. A multi-byte character
    straddling the limit is dropped whole, so the result can be shorter.
    """
    encoded = value.encode("utf-8")
    if len(encoded) <= max_len:
        return value
    return encoded[:max_len].decode("utf-8", errors="ignore")


def add_string_bounded(
    doc: JsonDocument,
    key: str | None,
    value: str | None,
    max_len: int,
) -> None:
    """Add at most ``max_len`` bytes of a string.

    ``None`` or a zero length yields ``null``; an empty string with a
    positive length yields ``""``.
    """

    def build() -> str | None:
        if value is None or max_len <= 0:
            return None
        return truncate_utf8(value, max_len)

    _add(doc, key, "add_string_bounded", build)


def add_object(
    doc: JsonDocument,
    key: str | None,
    nested: JsonDocument | None,
) -> None:
    """Insert a nested document's tree; ``None`` becomes ``null``.

    The nested tree is inserted as-is and ``nested`` is consumed: it must
    not be released, mutated or serialized afterwards. An errored nested
    document errors ``doc`` as well.
    """
    if nested is None:
        _add(doc, key, "add_object", lambda: None)
        return
    if not doc.is_usable:
        logger.debug("audit_encoder_skipped", encoder="add_object", key=key)
        return
    if nested is doc:
        doc.mark_error(
            AuditLoggingError(f"Cannot add document to itself [{key}]"),
            source="add_object",
        )
        return
    if not nested.is_usable:
        doc.mark_error(
            AuditLoggingError(f"Invalid JSON object [{key}] supplied"),
            source="add_object",
        )
        return

    doc.insert(key, nested.root, source="add_object")
    if not doc.is_error:
        nested._absorb()


def add_timestamp(doc: JsonDocument) -> None:
    """Add a ``timestamp`` field holding the current local time (ISO-8601)."""
    _add(doc, TIMESTAMP_KEY, "add_timestamp", format_iso_timestamp)


def add_version(doc: JsonDocument, major: int, minor: int) -> None:
    """Add a ``version`` field: ``{"major": major, "minor": minor}``."""
    _add(doc, VERSION_KEY, "add_version", lambda: version_object(major, minor))


def add_address(
    doc: JsonDocument,
    key: str | None,
    address: SocketAddress | None,
) -> None:
    """Add a family-tagged address string.

    Addresses without a canonical form are recorded as ``null`` so one bad
    field never aborts the record.
    """

    def build() -> str | None:
        if address is None:
            return None
        try:
            return format_address(address)
        except UnrecognizedAddressFamily as exc:
            logger.warning("audit_address_unrecognized", key=key, family=exc.family)
        except ValueError as exc:
            logger.warning("audit_address_invalid", key=key, error=str(exc))
        return None

    _add(doc, key, "add_address", build)


def add_sid(
    doc: JsonDocument,
    key: str | None,
    sid: SecurityIdentifier | None,
) -> None:
    """Add a SID in ``S-1-5-...`` form; ``None`` becomes ``null``."""
    _add(doc, key, "add_sid", lambda: None if sid is None else format_sid(sid))


def add_guid(doc: JsonDocument, key: str | None, guid: UUID | None) -> None:
    """Add a GUID in lowercase hyphenated form; ``None`` becomes ``null``."""
    _add(doc, key, "add_guid", lambda: None if guid is None else format_guid(guid))
