"""Configuration models for audit logging."""

from audit_logging.config.models.delivery import DeliveryConfig
from audit_logging.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from audit_logging.config.models.serializer import SerializerConfig

__all__ = [
    "DeliveryConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "SerializerConfig",
]
