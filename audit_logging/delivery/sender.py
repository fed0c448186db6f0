"""Hand finished audit documents to an event server."""

from audit_logging.builder.document import JsonDocument, serialize
from audit_logging.config import Settings, get_settings
from audit_logging.delivery.base import EventDelivery
from audit_logging.delivery.registry import get_event_server
from audit_logging.exceptions import DeliveryError, SerializationError
from audit_logging.observability.logging import get_logger
from audit_logging.observability.metrics import EVENTS_SENT, record

logger = get_logger(__name__)


async def send_event(
    delivery: EventDelivery | None,
    message_type: str,
    doc: JsonDocument,
) -> bool:
    """Serialize ``doc`` and deliver it.

    A document that cannot be serialized is never delivered, and a
    missing event server is not an error for the caller. Transport
    failures are logged and reported as False.

    Returns:
        True if the event server accepted the record
    """
    if delivery is None:
        logger.debug("audit_event_no_server", message_type=message_type)
        record(EVENTS_SENT, message_type=message_type, outcome="no_server")
        return False

    try:
        text = serialize(doc)
    except SerializationError as exc:
        logger.error("audit_event_not_serialized", message_type=message_type, error=exc.message)
        record(EVENTS_SENT, message_type=message_type, outcome="invalid")
        return False

    try:
        accepted = await delivery.deliver(message_type, text)
    except DeliveryError as exc:
        logger.warning("audit_event_delivery_failed", message_type=message_type, error=exc.message)
        record(EVENTS_SENT, message_type=message_type, outcome="failed")
        return False

    record(
        EVENTS_SENT,
        message_type=message_type,
        outcome="delivered" if accepted else "rejected",
    )
    return accepted


async def send_audit_event(
    doc: JsonDocument,
    message_type: str | None = None,
    settings: Settings | None = None,
) -> bool:
    """Deliver ``doc`` to the event server named in the delivery settings.

    ``message_type`` defaults to ``delivery.message_type``. Nothing is
    sent while delivery is disabled.
    """
    settings = settings or get_settings()

    delivery_config = settings.delivery
    message_type = message_type or delivery_config.message_type
    if not delivery_config.enabled:
        logger.debug("audit_event_delivery_disabled", message_type=message_type)
        record(EVENTS_SENT, message_type=message_type, outcome="disabled")
        return False

    delivery = get_event_server(delivery_config.event_server)
    return await send_event(delivery, message_type, doc)
