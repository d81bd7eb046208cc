"""
Builder activity tracking.

Gathers balance and transaction count from a ChainClient, combines them with
a deployed-contract count supplied by the caller (typically from an indexer)
and runs the estimator over the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import InvalidInput
from ..estimator import (
    DEFAULT_FAST_MULTIPLIER,
    ActivitySnapshot,
    EligibilityResult,
    EligibilityThresholds,
    FeeSchedule,
    compute_eligibility,
    compute_fee_schedule,
    recommendations,
)
from ..utils import is_valid_address, utc_now_rfc3339
from .rpc import ChainClient


@dataclass(frozen=True)
class EligibilityReport:
    address: str
    snapshot: ActivitySnapshot
    result: EligibilityResult
    recommendations: list[str] = field(default_factory=list)
    network: str = ""
    timestamp: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "network": self.network,
            "timestamp": self.timestamp,
            "metrics": {
                "transactionCount": self.snapshot.transaction_count,
                "contractsDeployed": self.snapshot.deployed_contract_count,
                "balance": str(self.snapshot.balance_ether),
            },
            "eligibility": self.result.to_dict(),
            "recommendations": list(self.recommendations),
        }


class BuilderTracker:
    def __init__(self, client: ChainClient) -> None:
        self.client = client

    def get_builder_metrics(
        self,
        address: str,
        deployed_contract_count: int,
        wallet_initialized: bool = False,
    ) -> ActivitySnapshot:
        if not is_valid_address(address):
            raise InvalidInput(f"Not a valid address: {address!r}")
        return ActivitySnapshot(
            transaction_count=self.client.get_transaction_count(address),
            deployed_contract_count=deployed_contract_count,
            balance=self.client.get_balance(address),
            wallet_initialized=wallet_initialized,
        )

    def check_eligibility(
        self,
        address: str,
        deployed_contract_count: int,
        wallet_initialized: bool = False,
        thresholds: Optional[EligibilityThresholds] = None,
    ) -> EligibilityReport:
        """
        Evaluate builder rewards eligibility for an address.

        Args:
            address: Builder address
            deployed_contract_count: Contracts deployed by the address
            wallet_initialized: Whether a signing credential is available
            thresholds: Eligibility thresholds (default thresholds when None)
        """
        snapshot = self.get_builder_metrics(address, deployed_contract_count, wallet_initialized)
        result = compute_eligibility(snapshot, thresholds)
        return EligibilityReport(
            address=address,
            snapshot=snapshot,
            result=result,
            recommendations=recommendations(result),
            network=self.client.network.name,
            timestamp=utc_now_rfc3339(),
        )

    def optimal_fees(self, fast_multiplier=DEFAULT_FAST_MULTIPLIER) -> FeeSchedule:
        return compute_fee_schedule(self.client.get_fee_data(), fast_multiplier)

    def network_status(self) -> dict[str, Any]:
        return {
            "network": self.client.network.name,
            "chainId": self.client.get_chain_id(),
            "blockNumber": self.client.get_block_number(),
            "gasPrice": self.client.get_gas_price(),
            "status": "active",
            "timestamp": utc_now_rfc3339(),
        }
