"""Prometheus metrics for audit record construction and delivery."""

from typing import TYPE_CHECKING

from prometheus_client import Counter, start_http_server

if TYPE_CHECKING:
    from audit_logging.config.models.observability import MetricsConfig

# Builder metrics
DOCUMENTS_SERIALIZED = Counter(
    "audit_logging_documents_serialized_total",
    "Total number of audit documents passed to serialization",
    labelnames=["outcome"],
)

ENCODER_FAULTS = Counter(
    "audit_logging_encoder_faults_total",
    "Total number of faults recorded by field encoders",
    labelnames=["encoder"],
)

# Delivery metrics
EVENTS_SENT = Counter(
    "audit_logging_events_sent_total",
    "Total number of audit events handed to a delivery backend",
    labelnames=["message_type", "outcome"],
)

_enabled = True


def setup_metrics(config: "MetricsConfig") -> None:
    """Apply the metrics configuration.

    Disabled metrics stop all counter updates. When ``serve`` is set the
    registry is exposed over HTTP on ``port``.
    """
    global _enabled
    _enabled = config.enabled
    if config.enabled and config.serve:
        start_http_server(config.port)


def metrics_enabled() -> bool:
    return _enabled


def record(counter: Counter, **labels: str) -> None:
    """Increment ``counter`` for ``labels`` unless metrics are disabled."""
    if _enabled:
        counter.labels(**labels).inc()
