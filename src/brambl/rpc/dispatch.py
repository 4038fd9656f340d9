"""
JSON-RPC request dispatch for a Bifrost node.

Every public operation funnels through :func:`dispatch`: it wraps the
parameter object in a JSON-RPC 2.0 envelope, POSTs it to
``base_url + route`` and returns the ``result`` payload, or raises
ProtocolError when the node answers with an ``error`` object.

No retry, no timeout and no backoff are applied here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import httpx
from loguru import logger

from ..config import ClientConfig
from .errors import ProtocolError, TransportError

JSONRPC_VERSION = "2.0"
DEFAULT_ID = "1"


@dataclass(frozen=True)
class RouteInfo:
    route: str
    method: str
    id: str = DEFAULT_ID


@dataclass(frozen=True)
class Envelope:
    method: str
    params: dict[str, Any] = field(default_factory=dict)
    id: str = DEFAULT_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": self.id,
            "method": self.method,
            "params": [dict(self.params)],
        }


@dataclass(frozen=True)
class Success:
    result: Any
    body: dict[str, Any]


@dataclass(frozen=True)
class Failure:
    error: Any
    body: dict[str, Any]


Response = Union[Success, Failure]


def build_envelope(route_info: RouteInfo, params: Optional[Mapping[str, Any]] = None) -> Envelope:
    return Envelope(
        method=route_info.method,
        params=dict(params or {}),
        id=route_info.id or DEFAULT_ID,
    )


def parse_response(body: Any) -> Response:
    """
    Classify a decoded response body.

    Args:
        body: Decoded JSON body

    Returns:
        Failure if the body carries a non-null ``error``, Success otherwise

    Raises:
        TransportError: If the body is not a JSON object
    """
    if not isinstance(body, dict):
        raise TransportError(f"Unexpected response body: {body!r}")
    if body.get("error") is not None:
        return Failure(error=body["error"], body=body)
    return Success(result=body.get("result"), body=body)


async def dispatch(
    route_info: RouteInfo,
    params: Optional[Mapping[str, Any]],
    config: ClientConfig,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """
    Send one JSON-RPC request to the node.

    Args:
        route_info: Route, method name and request id
        params: Parameter object, sent as the sole element of ``params``
        config: Shared client configuration (read once, before any I/O)
        transport: Optional httpx transport (e.g. httpx.MockTransport)

    Returns:
        The ``result`` field of the response, unmodified

    Raises:
        TransportError: If the HTTP exchange fails or the body is not JSON
        ProtocolError: If the node reports an error
    """
    envelope = build_envelope(route_info, params)
    url = config.base_url + route_info.route
    headers = dict(config.headers)
    content = json.dumps(envelope.to_dict()).encode("utf-8")

    logger.debug(f"POST {url} method={envelope.method} id={envelope.id}")

    try:
        async with httpx.AsyncClient(transport=transport, timeout=None) as client:
            response = await client.post(url, content=content, headers=headers)
        body = response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise TransportError(
            f"Invalid JSON from {url} (HTTP {response.status_code})"
        ) from exc

    parsed = parse_response(body)
    if isinstance(parsed, Failure):
        logger.warning(f"{envelope.method} failed: {parsed.error}")
        raise ProtocolError(parsed.error, response=parsed.body)
    return parsed.result
