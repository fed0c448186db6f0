"""In-memory JSON document under incremental construction.

A JsonDocument wraps either a JSON object (dict) or a JSON array (list).
Faults are sticky: once a document is errored every later mutation is a
no-op and serialization fails, so a caller can chain many field
insertions and check for success exactly once, at ``serialize``.
"""

import json
from enum import Enum
from types import TracebackType
from typing import Any, TypeAlias

from audit_logging.config.models.serializer import SerializerConfig
from audit_logging.exceptions import AllocationFailure, AuditLoggingError, SerializationError
from audit_logging.observability.logging import get_logger
from audit_logging.observability.metrics import DOCUMENTS_SERIALIZED, ENCODER_FAULTS, record

logger = get_logger(__name__)

JsonValue: TypeAlias = (
    "None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]"
)


class DocumentKind(str, Enum):
    """Kind of the root value; fixed when the document is created."""

    OBJECT = "object"
    ARRAY = "array"


class JsonDocument:
    """A JSON object or array being assembled field by field.

    Use ``new_object()`` / ``new_array()`` rather than constructing
    directly. The document can be used as a context manager; leaving the
    block releases the tree.
    """

    def __init__(
        self,
        kind: DocumentKind,
        config: SerializerConfig | None = None,
    ) -> None:
        self._kind = kind
        self._config = config or SerializerConfig()
        self._root: dict[str, Any] | list[Any] | None = (
            {} if kind == DocumentKind.OBJECT else []
        )
        self._error = False
        self._fault: AuditLoggingError | None = None
        self._absorbed = False

    def __enter__(self) -> "JsonDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        release(self)

    def __repr__(self) -> str:
        if self._error:
            state = "error"
        elif self._absorbed:
            state = "absorbed"
        elif self._root is None:
            state = "released"
        else:
            state = "ok"
        return f"JsonDocument(kind={self._kind.value}, state={state})"

    @property
    def kind(self) -> DocumentKind:
        return self._kind

    @property
    def config(self) -> SerializerConfig:
        return self._config

    @property
    def root(self) -> dict[str, Any] | list[Any] | None:
        """The underlying tree, or None once released or absorbed."""
        return self._root

    @property
    def is_error(self) -> bool:
        """True once any fault has been recorded on this document."""
        return self._error

    @property
    def fault(self) -> AuditLoggingError | None:
        """The first fault recorded on this document, if any."""
        return self._fault

    @property
    def is_object(self) -> bool:
        return self._kind == DocumentKind.OBJECT

    @property
    def is_array(self) -> bool:
        return self._kind == DocumentKind.ARRAY

    @property
    def is_usable(self) -> bool:
        """True while the document may still be mutated and serialized."""
        return not self._error and self._root is not None

    def mark_error(self, fault: AuditLoggingError, source: str = "document") -> None:
        """Record a fault and make the document permanently unusable."""
        if not self._error:
            self._fault = fault
        self._error = True
        record(ENCODER_FAULTS, encoder=source)
        logger.error(
            "audit_document_fault",
            source=source,
            error=fault.message,
            kind=self._kind.value,
        )

    def insert(self, key: str | None, value: Any, source: str = "insert") -> None:
        """Insert ``value`` under ``key`` (object) or append it (array).

        Keys are ignored for array roots. An object root requires a key.
        Failures mark the document errored instead of raising.
        """
        if not self.is_usable:
            logger.debug("audit_document_unusable", source=source, key=key)
            return

        if self._kind == DocumentKind.ARRAY:
            try:
                self._root.append(value)  # type: ignore[union-attr]
            except MemoryError:
                self.mark_error(
                    AllocationFailure(f"Unable to append {source} value", key=key),
                    source=source,
                )
            return

        if key is None:
            self.mark_error(
                AuditLoggingError(f"Object field for {source} requires a key"),
                source=source,
            )
            return
        try:
            self._root[key] = value  # type: ignore[index]
        except MemoryError:
            self.mark_error(
                AllocationFailure(f"Unable to add {source} value [{key}]", key=key),
                source=source,
            )

    def _absorb(self) -> None:
        """Give up the tree to a parent document."""
        self._root = None
        self._absorbed = True


def new_object(config: SerializerConfig | None = None) -> JsonDocument:
    """Create a document whose root is an empty JSON object."""
    return JsonDocument(DocumentKind.OBJECT, config)


def new_array(config: SerializerConfig | None = None) -> JsonDocument:
    """Create a document whose root is an empty JSON array."""
    return JsonDocument(DocumentKind.ARRAY, config)


def release(doc: JsonDocument) -> None:
    """Drop the document's tree.

    Safe on errored documents. Releasing twice is harmless but is not
    something callers should rely on.
    """
    doc._root = None


def serialize(doc: JsonDocument) -> str:
    """Return the JSON text of the document.

    Keys are emitted in insertion order on a single line (unless the
    document's config asks for indentation), with no trailing newline.

    Raises:
        SerializationError: If the document is errored, released or
            absorbed, or its tree cannot be encoded
    """
    if doc.is_error:
        record(DOCUMENTS_SERIALIZED, outcome="error")
        raise SerializationError(
            "Unable to serialize JSON document: document is in error state"
        )
    if doc.root is None:
        record(DOCUMENTS_SERIALIZED, outcome="error")
        raise SerializationError(
            "Unable to serialize JSON document: tree was released or absorbed"
        )

    config = doc.config
    try:
        text = json.dumps(
            doc.root,
            ensure_ascii=config.ensure_ascii,
            indent=config.indent,
            separators=config.separators,
            allow_nan=False,
        )
    except (MemoryError, TypeError, ValueError) as exc:
        record(DOCUMENTS_SERIALIZED, outcome="error")
        raise SerializationError(f"Unable to serialize JSON document: {exc}") from exc

    record(DOCUMENTS_SERIALIZED, outcome="ok")
    return text


def get_array(doc: JsonDocument, key: str) -> JsonDocument:
    """Return a new array document holding a copy of the array at ``key``.

    The copy is shallow. A missing key yields an empty array; an unusable
    source or a non-array value yields an errored document.
    """
    array = new_array(doc.config)
    if not doc.is_usable:
        array.mark_error(
            AuditLoggingError(f"Unable to get array [{key}]: source document is unusable"),
            source="get_array",
        )
        return array

    value = doc.root.get(key) if isinstance(doc.root, dict) else None
    if value is None:
        return array
    if not isinstance(value, list):
        array.mark_error(
            AuditLoggingError(f"Unable to get array [{key}]: value is not an array"),
            source="get_array",
        )
        return array
    try:
        array.root.extend(value)  # type: ignore[union-attr]
    except MemoryError:
        array.mark_error(
            AllocationFailure(f"Unable to copy array [{key}]", key=key),
            source="get_array",
        )
    return array


def get_object(doc: JsonDocument, key: str) -> JsonDocument:
    """Return a new object document holding a copy of the object at ``key``.

    The copy is shallow. A missing key yields an empty object; an unusable
    source or a non-object value yields an errored document.
    """
    obj = new_object(doc.config)
    if not doc.is_usable:
        obj.mark_error(
            AuditLoggingError(f"Unable to get object [{key}]: source document is unusable"),
            source="get_object",
        )
        return obj

    value = doc.root.get(key) if isinstance(doc.root, dict) else None
    if value is None:
        return obj
    if not isinstance(value, dict):
        obj.mark_error(
            AuditLoggingError(f"Unable to get object [{key}]: value is not an object"),
            source="get_object",
        )
        return obj
    try:
        obj.root.update(value)  # type: ignore[union-attr]
    except MemoryError:
        obj.mark_error(
            AllocationFailure(f"Unable to copy object [{key}]", key=key),
            source="get_object",
        )
    return obj
