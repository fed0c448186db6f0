"""In-memory implementation of EventDelivery."""

from audit_logging.delivery.base import EventDelivery
from audit_logging.exceptions import DeliveryError


class InMemoryEventDelivery(EventDelivery):
    """In-memory implementation of EventDelivery for testing and development.

    Keeps every delivered message in order. Not suitable for production use.
    """

    def __init__(self, *, accept: bool = True, fail: bool = False) -> None:
        """Initialize empty storage.

        Args:
            accept: Value returned from ``deliver`` for each message
            fail: Raise DeliveryError instead of storing messages
        """
        self.messages: list[tuple[str, str]] = []
        self.accept = accept
        self.fail = fail

    async def deliver(self, message_type: str, text: str) -> bool:
        """Store a message."""
        if self.fail:
            raise DeliveryError("In-memory delivery configured to fail", message_type)
        if self.accept:
            self.messages.append((message_type, text))
        return self.accept

    def texts(self, message_type: str | None = None) -> list[str]:
        """Return delivered texts, optionally filtered by message type."""
        return [
            text for kind, text in self.messages
            if message_type is None or kind == message_type
        ]
