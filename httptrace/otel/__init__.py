"""OpenTelemetry module for traced HTTP requests.

Submodules:
- exporter: OTLP/HTTP exporter setup
- tracer: Tracer provider creation
- span_builders: Span creation and outcome recording
- executor: Request lifecycle orchestration
"""

from httptrace.otel.executor import HttpTraceExporter
from httptrace.otel.exporter import setup_otel_exporter
from httptrace.otel.span_builders import (
    HTTP_METHOD,
    HTTP_RESPONSE,
    HTTP_STATUS_CODE,
    HTTP_URL,
    HttpSpanBuilder,
)
from httptrace.otel.tracer import TracerHandle, create_trace_provider

__all__ = [
    "setup_otel_exporter",
    "create_trace_provider",
    "TracerHandle",
    "HttpSpanBuilder",
    "HttpTraceExporter",
    "HTTP_METHOD",
    "HTTP_URL",
    "HTTP_STATUS_CODE",
    "HTTP_RESPONSE",
]
