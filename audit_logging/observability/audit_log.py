"""Write audit records to the structured log.

Used where an audit record should land in the service log instead of,
or as well as, being delivered to an event consumer. The level defaults
to ``observability.logging.audit_level``.
"""

from audit_logging.builder.document import JsonDocument, serialize
from audit_logging.config import Settings, get_settings
from audit_logging.exceptions import SerializationError
from audit_logging.observability.logging import get_logger, level_number

logger = get_logger(__name__)


def _audit_level(level: str | None, settings: Settings | None) -> int:
    if level is None:
        level = (settings or get_settings()).observability.logging.audit_level
    return level_number(level)


def log_json(
    prefix: str,
    doc: JsonDocument,
    level: str | None = None,
    settings: Settings | None = None,
) -> bool:
    """Log the JSON text of ``doc`` under ``prefix``.

    An unusable document is not logged as a record; an error is logged
    instead.

    Returns:
        True if the record was written to the log
    """
    try:
        text = serialize(doc)
    except SerializationError as exc:
        logger.error("audit_json_invalid", prefix=prefix, error=exc.message)
        return False

    logger.log(_audit_level(level, settings), "audit_json", prefix=prefix, json=text)
    return True


def log_human_text(
    prefix: str,
    message: str,
    level: str | None = None,
    settings: Settings | None = None,
) -> None:
    """Log a plain-text audit line under ``prefix``."""
    logger.log(_audit_level(level, settings), "audit_text", prefix=prefix, text=message)
