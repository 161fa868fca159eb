"""Instrumented execution of a single HTTP request.

The executor owns the full lifecycle of one trace: resolve settings, build
a dedicated provider, wrap the HTTP call in a span and flush the provider.
"""

import asyncio
import logging
from typing import Any, Callable, Mapping, Sequence, Union

import httpx
from opentelemetry import trace
from opentelemetry.sdk.trace.export import SpanExporter

from httptrace.config import TraceSettings
from httptrace.exceptions import InvalidInputError
from httptrace.models import RequestDescriptor, parse_request
from httptrace.otel.exporter import setup_otel_exporter
from httptrace.otel.span_builders import HttpSpanBuilder
from httptrace.otel.tracer import create_trace_provider
from httptrace.transport import send_request

logger = logging.getLogger("httptrace")

RequestLike = Union[RequestDescriptor, Mapping[str, Any]]


class HttpTraceExporter:
    """Performs one HTTP request and exports a span describing it.

    Example:
        >>> exporter = HttpTraceExporter()
        >>> await exporter.run(
        ...     "billing", "2.1", "http://tempo:4318/v1/traces",
        ...     [RequestDescriptor("https://api.example.com/data")],
        ... )
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        exporter_factory: Callable[[str], SpanExporter] = setup_otel_exporter,
    ):
        """Initialize the executor.

        Args:
            transport: Optional httpx transport for the outbound call
            exporter_factory: Builds the span exporter for an endpoint
        """
        self._transport = transport
        self._exporter_factory = exporter_factory

    async def run(
        self,
        service_name: str | None = None,
        service_version: str | None = None,
        otlp_endpoint: str | None = None,
        requests: Sequence[RequestLike] | None = None,
    ) -> None:
        """Trace the first request of ``requests``.

        Only the first descriptor is sent; any further ones are ignored.
        HTTP failures end up on the span and are not raised. Errors while
        building or shutting down the provider propagate.

        Raises:
            InvalidInputError: If ``requests`` is empty or missing
        """
        if not requests:
            raise InvalidInputError("No node parameters provided")

        request = parse_request(requests[0])
        if len(requests) > 1:
            logger.debug(
                f"Ignoring {len(requests) - 1} additional request descriptor(s)"
            )

        settings = TraceSettings.resolve(
            service_name, service_version, otlp_endpoint
        )
        tracer, provider = create_trace_provider(
            settings, self._exporter_factory(settings.otlp_endpoint)
        )

        try:
            builder = HttpSpanBuilder(tracer)
            span = builder.build(request)
            try:
                with trace.use_span(span, end_on_exit=False):
                    outcome = await send_request(request, self._transport)
                    builder.record_outcome(span, outcome)
            finally:
                span.end()
            logger.info(f"Traced {request} for {settings.service_name}")
        finally:
            # BatchSpanProcessor.shutdown blocks until the queue is exported
            await asyncio.to_thread(provider.shutdown)
