"""Delivery of finished audit records to event servers."""

from audit_logging.delivery.base import EventDelivery
from audit_logging.delivery.inmemory import InMemoryEventDelivery
from audit_logging.delivery.registry import (
    clear_event_servers,
    get_event_server,
    register_event_server,
    unregister_event_server,
)
from audit_logging.delivery.sender import send_audit_event, send_event

__all__ = [
    "EventDelivery",
    "InMemoryEventDelivery",
    "clear_event_servers",
    "get_event_server",
    "register_event_server",
    "send_audit_event",
    "send_event",
    "unregister_event_server",
]
