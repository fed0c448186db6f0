"""Tests for audit event delivery."""

import json

import pytest

from audit_logging.builder import add_string, add_version, new_object
from audit_logging.config import Settings
from audit_logging.delivery import (
    EventDelivery,
    InMemoryEventDelivery,
    get_event_server,
    register_event_server,
    send_audit_event,
    send_event,
    unregister_event_server,
)
from audit_logging.exceptions import AllocationFailure, DeliveryError


@pytest.fixture
def delivery() -> InMemoryEventDelivery:
    """Create a fresh in-memory delivery for each test."""
    return InMemoryEventDelivery()


@pytest.fixture
def event():
    """Create a small authentication event."""
    doc = new_object()
    add_string(doc, "type", "Authentication")
    add_version(doc, 1, 2)
    return doc


class TestInMemoryEventDelivery:
    """Tests for InMemoryEventDelivery."""

    @pytest.mark.asyncio
    async def test_stores_messages_in_order(self, delivery) -> None:
        """Should keep delivered messages in order."""
        assert await delivery.deliver("auth", "{}")
        assert await delivery.deliver("dsdb", "[]")
        assert delivery.messages == [("auth", "{}"), ("dsdb", "[]")]
        assert delivery.texts("dsdb") == ["[]"]

    @pytest.mark.asyncio
    async def test_rejecting_delivery(self) -> None:
        """Should report rejection without storing."""
        delivery = InMemoryEventDelivery(accept=False)
        assert await delivery.deliver("auth", "{}") is False
        assert delivery.messages == []

    @pytest.mark.asyncio
    async def test_failing_delivery_raises(self) -> None:
        """Should raise DeliveryError when configured to fail."""
        delivery = InMemoryEventDelivery(fail=True)
        with pytest.raises(DeliveryError):
            await delivery.deliver("auth", "{}")

    def test_is_event_delivery(self, delivery) -> None:
        """Should implement the EventDelivery interface."""
        assert isinstance(delivery, EventDelivery)


class TestRegistry:
    """Tests for the event server registry."""

    def test_register_and_get(self, delivery) -> None:
        """Should return the registered server."""
        register_event_server("auditd", delivery)
        assert get_event_server("auditd") is delivery

    def test_missing_server_is_none(self) -> None:
        """Should return None when nothing is registered."""
        assert get_event_server("auditd") is None

    def test_unregister(self, delivery) -> None:
        """Should forget an unregistered server."""
        register_event_server("auditd", delivery)
        unregister_event_server("auditd")
        unregister_event_server("never-registered")
        assert get_event_server("auditd") is None


class TestSendEvent:
    """Tests for send_event."""

    @pytest.mark.asyncio
    async def test_delivers_serialized_document(self, delivery, event) -> None:
        """Should deliver the JSON text of the document."""
        assert await send_event(delivery, "auth", event)
        [(message_type, text)] = delivery.messages
        assert message_type == "auth"
        assert json.loads(text) == {
            "type": "Authentication",
            "version": {"major": 1, "minor": 2},
        }

    @pytest.mark.asyncio
    async def test_errored_document_not_delivered(self, delivery, event) -> None:
        """Should never deliver a document in error state."""
        event.mark_error(AllocationFailure("simulated"))
        assert await send_event(delivery, "auth", event) is False
        assert delivery.messages == []

    @pytest.mark.asyncio
    async def test_no_server(self, event) -> None:
        """Should return False when there is no event server."""
        assert await send_event(get_event_server("auditd"), "auth", event) is False

    @pytest.mark.asyncio
    async def test_transport_failure_reported(self, event, captured_logs) -> None:
        """Should log and report transport failures."""
        delivery = InMemoryEventDelivery(fail=True)
        assert await send_event(delivery, "auth", event) is False
        assert any(e["event"] == "audit_event_delivery_failed" for e in captured_logs)

    @pytest.mark.asyncio
    async def test_rejection_reported(self, event) -> None:
        """Should pass through a rejection from the server."""
        delivery = InMemoryEventDelivery(accept=False)
        assert await send_event(delivery, "auth", event) is False


class TestSendAuditEvent:
    """Tests for send_audit_event."""

    @pytest.mark.asyncio
    async def test_uses_configured_server_and_message_type(self, delivery, event) -> None:
        """Should send to the named event server with the default message type."""
        settings = Settings(delivery={"event_server": "eventlogd", "message_type": "auth_event"})
        register_event_server("eventlogd", delivery)

        assert await send_audit_event(event, settings=settings)
        [(message_type, _)] = delivery.messages
        assert message_type == "auth_event"

    @pytest.mark.asyncio
    async def test_explicit_message_type_wins(self, delivery, event) -> None:
        """Should prefer the caller's message type."""
        register_event_server("auditd", delivery)
        assert await send_audit_event(
            event, message_type="authz", settings=Settings(delivery={"event_server": "auditd"})
        )
        assert delivery.messages[0][0] == "authz"

    @pytest.mark.asyncio
    async def test_disabled_delivery_sends_nothing(self, delivery, event, captured_logs) -> None:
        """Should not contact the event server while delivery is disabled."""
        settings = Settings(delivery={"enabled": False})
        register_event_server("auditd", delivery)

        assert await send_audit_event(event, settings=settings) is False
        assert delivery.messages == []
        assert any(e["event"] == "audit_event_delivery_disabled" for e in captured_logs)

    @pytest.mark.asyncio
    async def test_unregistered_server(self, event) -> None:
        """Should report False when the configured server is not registered."""
        settings = Settings(delivery={"event_server": "missing"})
        assert await send_audit_event(event, settings=settings) is False
