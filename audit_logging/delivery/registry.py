"""Named event servers that audit records can be sent to."""

from audit_logging.delivery.base import EventDelivery
from audit_logging.observability.logging import get_logger

logger = get_logger(__name__)

_servers: dict[str, EventDelivery] = {}


def register_event_server(name: str, delivery: EventDelivery) -> None:
    """Register ``delivery`` under ``name``, replacing any previous one."""
    _servers[name] = delivery
    logger.debug("event_server_registered", name=name, delivery=type(delivery).__name__)


def unregister_event_server(name: str) -> None:
    """Remove the server registered under ``name``, if any."""
    _servers.pop(name, None)


def get_event_server(name: str) -> EventDelivery | None:
    """Look up a registered event server.

    Returns:
        The delivery backend, or None if nothing is registered as ``name``
    """
    server = _servers.get(name)
    if server is None:
        logger.debug("event_server_not_found", name=name)
    return server


def clear_event_servers() -> None:
    """Remove all registered event servers."""
    _servers.clear()
