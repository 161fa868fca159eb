"""Per-item execution of traced HTTP requests.

A workflow hands over a list of items, each carrying the parameters of one
request. Every item gets its own executor run, and therefore its own trace
provider, and reports ``success: True`` once that run completes.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx

from httptrace.config import (
    DEFAULT_OTLP_ENDPOINT,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_VERSION,
)
from httptrace.models import RequestDescriptor
from httptrace.otel.executor import HttpTraceExporter

logger = logging.getLogger("httptrace")


@dataclass(frozen=True)
class NodeProperty:
    name: str
    display_name: str
    default: Any
    options: tuple[str, ...] = ()
    description: str = ""


NODE_PROPERTIES: tuple[NodeProperty, ...] = (
    NodeProperty("url", "Request URL", ""),
    NodeProperty(
        "method", "Method", "GET", options=("GET", "POST", "PUT", "DELETE")
    ),
    NodeProperty("body", "Body (JSON)", {}),
    NodeProperty(
        "otlpEndpoint",
        "OTLP Endpoint",
        DEFAULT_OTLP_ENDPOINT,
        description="Tempo/Jaeger/Datadog OTLP HTTP endpoint",
    ),
    NodeProperty("serviceName", "Service Name", DEFAULT_SERVICE_NAME),
    NodeProperty("serviceVersion", "Service Version", DEFAULT_SERVICE_VERSION),
)

_PROPERTIES_BY_NAME = {prop.name: prop for prop in NODE_PROPERTIES}


def get_node_parameter(item: Mapping[str, Any], name: str) -> Any:
    """Return the item's value for ``name``, or the property default.

    Raises:
        KeyError: If ``name`` is not a known node property
    """
    prop = _PROPERTIES_BY_NAME[name]
    value = item.get(name)
    if value is None:
        # defaults may be mutable, never hand out the shared instance
        return copy.deepcopy(prop.default)
    return value


class HttpTraceExporterNode:
    """Runs one traced HTTP request per input item."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def execute(
        self, items: Sequence[Mapping[str, Any]]
    ) -> list[dict[str, Any]]:
        """Trace every item in order.

        Args:
            items: Parameter mappings, keyed by node property name

        Returns:
            One ``{"url", "method", "success"}`` result per item
        """
        results: list[dict[str, Any]] = []
        for index, item in enumerate(items):
            url = get_node_parameter(item, "url")
            method = get_node_parameter(item, "method")
            body = get_node_parameter(item, "body")
            otlp_endpoint = get_node_parameter(item, "otlpEndpoint")
            service_name = get_node_parameter(item, "serviceName")
            service_version = get_node_parameter(item, "serviceVersion")

            logger.debug(f"Item {index}: {method} {url}")
            exporter = HttpTraceExporter(transport=self._transport)
            await exporter.run(
                service_name,
                service_version,
                otlp_endpoint,
                [RequestDescriptor(url=url, method=method, body=body)],
            )
            results.append({"url": url, "method": method, "success": True})

        return results
