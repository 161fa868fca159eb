import httpx
import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def endpoints():
    """OTLP endpoints the executor asked an exporter for."""
    return []


@pytest.fixture
def exporter_factory(span_exporter, endpoints):
    def factory(endpoint: str):
        endpoints.append(endpoint)
        return span_exporter

    return factory


@pytest.fixture
def sent_requests():
    return []


@pytest.fixture
def respond_with(sent_requests):
    """Build a MockTransport answering every request with one response."""

    def build(status_code: int = 200, **response_kwargs):
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(handler)

    return build
