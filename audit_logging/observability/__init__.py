"""Observability: structured logging and metrics for the audit builder.

Provides standardized observability primitives using structlog for logging
and Prometheus for metrics.
"""
