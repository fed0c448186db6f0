"""EventDelivery abstract interface."""

from abc import ABC, abstractmethod


class EventDelivery(ABC):
    """Abstract transport for finished audit records.

    Implementations move serialized text to an event consumer (a local
    daemon, a message bus, a file). They receive only complete documents.
    """

    @abstractmethod
    async def deliver(self, message_type: str, text: str) -> bool:
        """Send one serialized audit record.

        Returns:
            True if the consumer accepted the message

        Raises:
            DeliveryError: If the transport failed
        """
        pass
