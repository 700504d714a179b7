"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from subject_rights.shared.telemetry.logging import setup_logging
from subject_rights.shared.telemetry.telemetry import Telemetry, span_exporter
from subject_rights.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "Telemetry",
    "span_exporter",
    "traced",
    "add_span_attributes",
]
