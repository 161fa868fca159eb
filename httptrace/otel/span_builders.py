"""Span builder for traced HTTP requests."""

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from httptrace.models import (
    HttpOutcome,
    HttpResponse,
    RequestDescriptor,
    TransportFailure,
)
from httptrace.utils import is_structured, to_json

HTTP_METHOD = "http.method"
HTTP_URL = "http.url"
HTTP_STATUS_CODE = "http.status_code"
HTTP_RESPONSE = "http.response"

FAILURE_DESCRIPTION = "HTTP request failed"


class HttpSpanBuilder:
    """Builder for the span describing one outbound HTTP request."""

    def __init__(self, tracer: trace.Tracer):
        """Initialize the builder.

        Args:
            tracer: The tracer to use for creating spans
        """
        self.tracer = tracer

    def build(self, request: RequestDescriptor) -> trace.Span:
        """Start the span for ``request``.

        The span is returned without being ended; the caller ends it once
        the outcome is recorded.
        """
        return self.tracer.start_span(
            name=f"HTTP {request.method.value}",
            kind=trace.SpanKind.CLIENT,
            attributes={
                HTTP_METHOD: request.method.value,
                HTTP_URL: request.url,
            },
        )

    def record_outcome(self, span: trace.Span, outcome: HttpOutcome) -> None:
        """Set the attributes and status matching the call's outcome."""
        if isinstance(outcome, HttpResponse):
            self._record_response(span, outcome)
        elif isinstance(outcome, TransportFailure):
            self._record_failure(span, outcome)
        else:
            raise TypeError(f"Unsupported outcome: {outcome!r}")

    def _record_response(self, span: trace.Span, response: HttpResponse) -> None:
        body = response.body
        if not is_structured(body):
            body = {"data": body}
        span.set_attribute(HTTP_STATUS_CODE, response.status_code)
        span.set_attribute(HTTP_RESPONSE, to_json(body))

    def _record_failure(
        self, span: trace.Span, failure: TransportFailure
    ) -> None:
        span.record_exception(failure.error)
        span.set_status(Status(StatusCode.ERROR, FAILURE_DESCRIPTION))
        span.set_attribute(HTTP_RESPONSE, to_json({"error": failure.message}))
