"""OpenTelemetry tracer creation and provider setup."""

import logging
from typing import NamedTuple

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from httptrace.config import TraceSettings

logger = logging.getLogger("httptrace")


class TracerHandle(NamedTuple):
    tracer: trace.Tracer
    provider: TracerProvider


def create_trace_provider(
    settings: TraceSettings, exporter: SpanExporter
) -> TracerHandle:
    """Create a provider and tracer owned by a single traced request.

    The provider is not installed as the global tracer provider. Spans made
    current through ``trace.use_span`` are still visible to nested
    instrumentation through the OpenTelemetry context.

    Args:
        settings: Resolved service identity and endpoint
        exporter: Exporter receiving the batched spans

    Returns:
        TracerHandle of (tracer, provider)
    """
    resource = Resource(
        attributes={
            SERVICE_NAME: settings.service_name,
            SERVICE_VERSION: settings.service_version,
        }
    )
    # shut down explicitly by the owner, not at interpreter exit
    provider = TracerProvider(resource=resource, shutdown_on_exit=False)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    logger.debug(
        f"Created tracer provider for {settings.service_name} "
        f"{settings.service_version} -> {settings.otlp_endpoint}"
    )
    return TracerHandle(provider.get_tracer(settings.tracer_name), provider)
