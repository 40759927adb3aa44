"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from crm.shared.telemetry.logging import (
    RequestIdFilter,
    request_id_var,
    setup_logging,
)
from crm.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry
from crm.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "RequestIdFilter",
    "TelemetryConfig",
    "add_span_attributes",
    "get_telemetry",
    "request_id_var",
    "set_telemetry",
    "setup_logging",
    "traced",
]
