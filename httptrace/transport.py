"""Outbound HTTP call for a traced request.

One attempt per request: no retries and no client-side timeout. Every
status code counts as a completed call; only transport-level errors produce
a :class:`~httptrace.models.TransportFailure`.
"""

import logging
from typing import Any

import httpx

from httptrace.models import (
    HttpOutcome,
    HttpResponse,
    RequestDescriptor,
    TransportFailure,
)

logger = logging.getLogger("httptrace")


def decode_body(response: httpx.Response) -> Any:
    """Return the JSON-decoded body, or the raw text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


async def send_request(
    request: RequestDescriptor,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpOutcome:
    """Perform the HTTP call described by ``request``.

    Args:
        request: The request to send
        transport: Optional httpx transport, used instead of the network

    Returns:
        HttpResponse on any response, TransportFailure if the call raised,
        including errors while encoding the request body
    """
    logger.debug(f"Sending {request}")
    async with httpx.AsyncClient(
        transport=transport, timeout=None, follow_redirects=True
    ) as client:
        try:
            response = await client.request(
                request.method.value, request.url, json=request.body
            )
        except Exception as e:
            # anything raised by the call itself is an outcome of the request
            logger.warning(f"{request} failed: {e}")
            return TransportFailure(error=e)

        logger.debug(f"{request} returned {response.status_code}")
        return HttpResponse(
            status_code=response.status_code, body=decode_body(response)
        )
