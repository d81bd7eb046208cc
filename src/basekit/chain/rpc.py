"""
JSON-RPC client for Base networks.

Thin collaborator over httpx: every method maps to a single ``eth_*`` call
and returns plain Python values (hex quantities decoded to ``int``). One
client is constructed per call site; nothing here is module-level state.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from ..errors import RpcError
from ..estimator import FeeObservation
from ..networks import NetworkConfig, get_rpc_url, resolve_network
from ..utils import hex_to_int

DEFAULT_TIMEOUT = 30


class ChainClient:
    """
    Read / send access to one Base network endpoint.

    Args:
        network: Network to talk to (default: resolved from BASE_NETWORK)
        rpc_url: Endpoint override (default: BASE_RPC_URL or the network default)
        http_client: Pre-built httpx.Client to reuse; a short-lived client is
            opened per request otherwise
    """

    def __init__(
        self,
        network: Optional[NetworkConfig] = None,
        rpc_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.network = network or resolve_network()
        self.rpc_url = rpc_url or get_rpc_url(self.network)
        self.timeout = timeout
        self._http_client = http_client
        self._request_id = 0

    def call(self, method: str, params: Optional[list] = None) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "eth_getBalance")
            params: RPC parameters

        Returns:
            Result field from the RPC response

        Raises:
            RpcError: If the endpoint answers with an error object
            httpx.HTTPError: On transport failures or non-2xx responses
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": self._request_id,
        }

        if self._http_client is not None:
            response = self._http_client.post(self.rpc_url, json=payload)
            response.raise_for_status()
            data = response.json()
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.rpc_url, json=payload)
                response.raise_for_status()
                data = response.json()

        if "error" in data:
            raise RpcError(f"RPC error from {method}: {data['error']}")

        return data.get("result")

    def _quantity(self, method: str, params: Optional[list] = None) -> int:
        result = self.call(method, params)
        if not isinstance(result, str):
            raise RpcError(f"{method} returned a non-quantity result: {result!r}")
        return hex_to_int(result)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_block_number(self) -> int:
        return self._quantity("eth_blockNumber")

    def get_chain_id(self) -> int:
        return self._quantity("eth_chainId")

    def get_balance(self, address: str) -> int:
        """Get ETH balance for an address, in wei."""
        return self._quantity("eth_getBalance", [address, "latest"])

    def get_transaction_count(self, address: str) -> int:
        """Get the transaction count (nonce) for an address."""
        return self._quantity("eth_getTransactionCount", [address, "latest"])

    def get_gas_price(self) -> int:
        return self._quantity("eth_gasPrice")

    def get_block(self, block: str = "latest") -> dict:
        result = self.call("eth_getBlockByNumber", [block, False])
        if not isinstance(result, dict):
            raise RpcError(f"Block {block} not found")
        return result

    def get_max_priority_fee(self) -> Optional[int]:
        """
        Get the node's suggested priority fee.

        Returns None when the node does not implement
        ``eth_maxPriorityFeePerGas``.
        """
        try:
            return self._quantity("eth_maxPriorityFeePerGas")
        except RpcError:
            return None

    def get_fee_data(self) -> FeeObservation:
        """
        Read the current fee observation.

        Uses the latest block's ``baseFeePerGas``; pre-London style blocks
        without one fall back to ``eth_gasPrice``.
        """
        block = self.get_block("latest")
        base_fee_hex = block.get("baseFeePerGas")
        if base_fee_hex is not None:
            base_fee = hex_to_int(base_fee_hex)
        else:
            base_fee = self.get_gas_price()
        return FeeObservation(base_fee=base_fee, priority_fee=self.get_max_priority_fee())

    def estimate_gas(self, tx: dict) -> int:
        return self._quantity("eth_estimateGas", [_jsonable_tx(tx)])

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def send_raw_transaction(self, raw_tx: str) -> str:
        """
        Send a signed raw transaction.

        Args:
            raw_tx: 0x-prefixed hex encoded signed transaction

        Returns:
            Transaction hash (0x-prefixed hex)
        """
        return self.call("eth_sendRawTransaction", [raw_tx])

    def get_transaction_receipt(self, tx_hash: str) -> Optional[dict]:
        return self.call("eth_getTransactionReceipt", [tx_hash])

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: int = 120,
        poll_interval: float = 2.0,
    ) -> dict:
        """
        Wait for a transaction receipt.

        Raises:
            TimeoutError: If receipt not found within timeout
        """
        start = time.time()
        while time.time() - start < timeout:
            receipt = self.get_transaction_receipt(tx_hash)
            if receipt is not None:
                return receipt
            time.sleep(poll_interval)

        raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")


def _jsonable_tx(tx: dict) -> dict:
    """Hex-encode integer fields for JSON-RPC transaction objects."""
    out = {}
    for key, value in tx.items():
        if key == "chainId":
            continue
        if isinstance(value, int) and not isinstance(value, bool):
            out[key] = hex(value)
        else:
            out[key] = value
    return out
