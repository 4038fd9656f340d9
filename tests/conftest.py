from __future__ import annotations

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from brambl import Requests


class FakeNode:
    """Records every JSON-RPC request and answers through ``responder``."""

    def __init__(self, responder: Optional[Callable[[dict[str, Any]], Any]] = None) -> None:
        self.responder = responder or (lambda body: {"jsonrpc": "2.0", "id": body["id"], "result": {}})
        self.requests: list[httpx.Request] = []
        self.bodies: list[dict[str, Any]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(request)
        self.bodies.append(body)
        reply = self.responder(body)
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def methods(self) -> list[str]:
        return [body["method"] for body in self.bodies]


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def requests(node: FakeNode) -> Requests:
    return Requests(transport=node.transport)


# One valid value per known parameter name
SAMPLE_PARAMS: dict[str, Any] = {
    "publicKeys": ["6sYyiTguyQ455w2dGEaNbrwkAWAEYV1Zk6FtZMknWDKQ"],
    "password": "genesis",
    "publicKey": "6sYyiTguyQ455w2dGEaNbrwkAWAEYV1Zk6FtZMknWDKQ",
    "tx": {"txType": "PolyTransfer", "signatures": {}},
    "recipient": "A9vRt6hw7w4c7b4qEkQHYptpqBGpKM5MGoXyrkGCbrfb",
    "amount": 10,
    "fee": 1,
    "issuer": "6sYyiTguyQ455w2dGEaNbrwkAWAEYV1Zk6FtZMknWDKQ",
    "assetCode": "test",
    "sender": ["6sYyiTguyQ455w2dGEaNbrwkAWAEYV1Zk6FtZMknWDKQ"],
    "assetId": "3Xf8Zk9jBQcsp7GXtZp3CDDNq6N4UgrLd8XvdmsGuxNi",
    "transactionId": "9MRxd6mGbNjr7hbRDRPUhRbRH2fMZDq8gnC63TT8NVe7",
    "blockId": "DmtcKyLohzfZGGkS5HDN9pRS9vuLGEL6xvr2ZUfj5Jmq",
    "numBlocks": 5,
}


def sample_params(*fields: str) -> dict[str, Any]:
    return {name: SAMPLE_PARAMS[name] for name in fields}
