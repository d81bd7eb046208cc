"""
Transaction building and sending.

Builds EIP-1559 (type 2) transactions priced from a FeeSchedule tier, signs
them with eth-account and sends them through a ChainClient. The sender pays
gas.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_abi import encode
from eth_hash.auto import keccak

from ..errors import InvalidInput
from ..estimator import FeeSchedule, buffered_gas_limit, compute_fee_schedule
from ..estimator.fees import check_quantity
from ..utils import hex_to_int, is_valid_address
from .rpc import ChainClient
from .wallet import get_account


def to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format.

    eth-account requires checksummed addresses in transaction fields.
    """
    if not is_valid_address(address):
        raise InvalidInput(f"Not a valid address: {address!r}")
    addr = address[2:].lower()
    addr_hash = keccak(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


def _fee_fields(client: ChainClient, schedule: Optional[FeeSchedule], tier: str) -> dict[str, int]:
    if schedule is None:
        schedule = compute_fee_schedule(client.get_fee_data())
    return schedule.tier(tier).to_tx_params()


def _gas_limit(client: ChainClient, tx: dict, gas_limit: Optional[int]) -> int:
    if gas_limit is None:
        return buffered_gas_limit(client.estimate_gas(tx))
    return check_quantity("gas_limit", gas_limit)


def build_transfer_tx(
    client: ChainClient,
    sender: str,
    to: str,
    value_wei: int,
    schedule: Optional[FeeSchedule] = None,
    tier: str = "standard",
    gas_limit: Optional[int] = None,
) -> dict:
    """
    Build an unsigned ETH transfer.

    Args:
        client: Chain client for nonce, fee and gas lookups
        sender: Sending address
        to: Recipient address
        value_wei: Amount in wei
        schedule: Fee schedule to price from (default: fetched from the chain)
        tier: "slow", "standard" or "fast"
        gas_limit: Gas limit (default: estimate plus 20%)

    Returns:
        Unsigned transaction dict
    """
    if isinstance(value_wei, bool) or not isinstance(value_wei, int) or value_wei < 0:
        raise InvalidInput(f"value_wei must be a non-negative integer, got {value_wei!r}")

    tx: dict[str, Any] = {
        "type": 2,
        "from": to_checksum_address(sender),
        "to": to_checksum_address(to),
        "value": value_wei,
        "data": "0x",
        "nonce": client.get_transaction_count(sender),
        "chainId": client.network.chain_id,
        **_fee_fields(client, schedule, tier),
    }
    tx["gas"] = _gas_limit(client, tx, gas_limit)
    return tx


def build_deploy_tx(
    client: ChainClient,
    sender: str,
    bytecode: str,
    constructor_types: Optional[list[str]] = None,
    constructor_args: Optional[list] = None,
    schedule: Optional[FeeSchedule] = None,
    tier: str = "standard",
    gas_limit: Optional[int] = None,
) -> dict:
    """
    Build an unsigned contract creation transaction (no ``to`` field).

    Constructor arguments are ABI-encoded and appended to the bytecode.
    """
    deploy_data = bytecode[2:] if bytecode.startswith("0x") else bytecode
    if not deploy_data:
        raise InvalidInput("bytecode is empty")
    try:
        bytes.fromhex(deploy_data)
    except ValueError:
        raise InvalidInput("bytecode is not valid hex") from None

    constructor_types = constructor_types or []
    constructor_args = constructor_args or []
    if len(constructor_types) != len(constructor_args):
        raise InvalidInput(
            f"Got {len(constructor_args)} constructor args for {len(constructor_types)} types"
        )
    if constructor_types:
        deploy_data += encode(constructor_types, constructor_args).hex()

    tx: dict[str, Any] = {
        "type": 2,
        "from": to_checksum_address(sender),
        "data": "0x" + deploy_data,
        "value": 0,
        "nonce": client.get_transaction_count(sender),
        "chainId": client.network.chain_id,
        **_fee_fields(client, schedule, tier),
    }
    tx["gas"] = _gas_limit(client, tx, gas_limit)
    return tx


def sign_and_send(
    client: ChainClient,
    tx: dict,
    private_key: Optional[str] = None,
    wait: bool = True,
    timeout: int = 120,
) -> dict:
    """
    Sign a transaction and send it.

    Args:
        client: Chain client to send through
        tx: Unsigned transaction dict
        private_key: 0x-prefixed hex private key (default: from .env)
        wait: Whether to wait for receipt
        timeout: Receipt wait timeout

    Returns:
        Dict with tx_hash and, when waiting, receipt, status and
        contract_address for deployments
    """
    account = get_account(private_key)
    unsigned = {k: v for k, v in tx.items() if k != "from"}
    signed = account.sign_transaction(unsigned)
    raw_tx = "0x" + signed.raw_transaction.hex()

    tx_hash = client.send_raw_transaction(raw_tx)
    result: dict[str, Any] = {"tx_hash": tx_hash}

    if wait:
        receipt = client.wait_for_receipt(tx_hash, timeout=timeout)
        result["receipt"] = receipt
        result["status"] = hex_to_int(receipt.get("status", "0x0"))
        if receipt.get("contractAddress"):
            result["contract_address"] = receipt["contractAddress"]

    return result
