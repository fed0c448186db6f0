"""Event delivery configuration models."""

from pydantic import BaseModel, Field


class DeliveryConfig(BaseModel):
    """Where finished audit records are sent."""

    enabled: bool = Field(default=True, description="Send audit events to the event server")
    event_server: str = Field(
        default="auditd",
        min_length=1,
        description="Name of the registered event server",
    )
    message_type: str = Field(
        default="audit_event",
        min_length=1,
        description="Default message type tag for delivered events",
    )
