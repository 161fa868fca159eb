from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from .exceptions import ValidationError


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    method: HttpMethod = HttpMethod.GET
    body: Any = None

    def __post_init__(self):
        if isinstance(self.method, str):
            try:
                method = HttpMethod(self.method.upper())
            except ValueError as e:
                raise ValidationError(
                    f"Invalid HTTP method: {self.method}",
                    f"Use one of {', '.join(m.value for m in HttpMethod)}.",
                ) from e
            object.__setattr__(self, "method", method)

    def __str__(self) -> str:
        return f"{self.method.value} {self.url}"


def parse_request(
    request: Union[RequestDescriptor, Mapping[str, Any]],
) -> RequestDescriptor:
    """Build a RequestDescriptor from a descriptor or a plain mapping."""
    if isinstance(request, RequestDescriptor):
        return request
    return RequestDescriptor(
        url=request.get("url", ""),
        method=request.get("method") or HttpMethod.GET,
        body=request.get("body"),
    )


@dataclass(frozen=True)
class HttpResponse:
    """A completed HTTP exchange, whatever its status code."""

    status_code: int
    body: Any


@dataclass(frozen=True)
class TransportFailure:
    """The HTTP call raised before any response was received."""

    error: Exception

    @property
    def message(self) -> str:
        return str(self.error) or "Unknown error"


HttpOutcome = Union[HttpResponse, TransportFailure]
