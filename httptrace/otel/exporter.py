"""OpenTelemetry OTLP exporter setup."""

from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
    OTLPSpanExporter,
)


def setup_otel_exporter(endpoint: str) -> OTLPSpanExporter:
    """Setup an OTLP/HTTP span exporter.

    Args:
        endpoint: The full OTLP traces URL, e.g. http://localhost:4318/v1/traces

    Returns:
        Configured OTLPSpanExporter instance
    """
    return OTLPSpanExporter(endpoint=endpoint)
