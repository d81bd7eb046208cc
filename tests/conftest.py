"""Shared fixtures: a ChainClient backed by an in-memory JSON-RPC endpoint."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from basekit.chain.rpc import ChainClient
from basekit.networks import get_network

ADDRESS = "0x52908400098527886e0f7030069857d2e4169ee7"
OTHER_ADDRESS = "0x8617e340b3d01fa5f11f306f4090fd50e238070d"


class FakeNode:
    """Answers JSON-RPC requests from a method -> result table."""

    def __init__(self, results: dict[str, Any]) -> None:
        self.results = dict(results)
        self.calls: list[tuple[str, list]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        method, params = body["method"], body["params"]
        self.calls.append((method, params))
        if method not in self.results:
            return httpx.Response(
                200,
                json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": -32601, "message": "method not found"}},
            )
        result = self.results[method]
        if callable(result):
            result = result(params)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]


DEFAULT_RESULTS: dict[str, Any] = {
    "eth_blockNumber": hex(1_234_567),
    "eth_chainId": hex(8453),
    "eth_getBalance": hex(10**16),
    "eth_getTransactionCount": hex(12),
    "eth_gasPrice": hex(1_100_000_000),
    "eth_getBlockByNumber": {"number": hex(1_234_567), "baseFeePerGas": hex(1_000_000_000)},
    "eth_maxPriorityFeePerGas": hex(100_000_000),
    "eth_estimateGas": hex(21_000),
}


@pytest.fixture()
def fake_node() -> FakeNode:
    return FakeNode(DEFAULT_RESULTS)


@pytest.fixture()
def make_client(fake_node: FakeNode) -> Callable[..., ChainClient]:
    def _make(network: str = "mainnet") -> ChainClient:
        http_client = httpx.Client(transport=httpx.MockTransport(fake_node.handler))
        return ChainClient(network=get_network(network), rpc_url="http://node.test", http_client=http_client)

    return _make


@pytest.fixture()
def client(make_client: Callable[..., ChainClient]) -> ChainClient:
    return make_client()
