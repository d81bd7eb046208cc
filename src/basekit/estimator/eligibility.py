"""
Builder rewards eligibility and activity scoring.

Balances are wei integers and the minimum-balance threshold is expressed in
ether; the two are compared as exact rationals, never as floats.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Mapping

from ..errors import InvalidInput
from ..utils import WEI_PER_ETHER, from_wei
from .fees import Number, as_decimal, check_quantity

CONTRACT_WEIGHT = 50
WALLET_BONUS = 10
BASELINE_SCORE = 20
MAX_ACTIVITY_SCORE = 1000


@dataclass(frozen=True)
class ActivitySnapshot:
    """
    On-chain activity of one builder address.

    Attributes:
        transaction_count: Number of transactions sent (nonce)
        deployed_contract_count: Contracts deployed, as reported by an indexer
        balance: ETH balance in wei
        wallet_initialized: Whether the caller holds a signing credential
    """
    transaction_count: int
    deployed_contract_count: int
    balance: int
    wallet_initialized: bool = False

    def __post_init__(self) -> None:
        check_quantity("transaction_count", self.transaction_count)
        check_quantity("deployed_contract_count", self.deployed_contract_count)
        check_quantity("balance", self.balance)
        if not isinstance(self.wallet_initialized, bool):
            raise InvalidInput(f"wallet_initialized must be a bool, got {self.wallet_initialized!r}")

    @property
    def balance_ether(self) -> Decimal:
        return from_wei(self.balance)


@dataclass(frozen=True)
class EligibilityThresholds:
    min_tx: int = 10
    min_contracts: int = 1
    min_balance: Number = Decimal("0.01")

    def __post_init__(self) -> None:
        check_quantity("min_tx", self.min_tx)
        check_quantity("min_contracts", self.min_contracts)
        min_balance = as_decimal("min_balance", self.min_balance)
        if min_balance < 0:
            raise InvalidInput(f"min_balance must be non-negative, got {min_balance}")
        object.__setattr__(self, "min_balance", min_balance)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EligibilityThresholds":
        unknown = set(payload) - {"min_tx", "min_contracts", "min_balance"}
        if unknown:
            raise InvalidInput(f"Unknown threshold fields: {sorted(unknown)}")
        return cls(**payload)


@dataclass(frozen=True)
class EligibilityResult:
    has_minimum_activity: bool
    has_deployed_contracts: bool
    has_minimum_balance: bool
    activity_score: int

    @property
    def overall_eligible(self) -> bool:
        return self.has_minimum_activity and self.has_deployed_contracts and self.has_minimum_balance

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasMinimumActivity": self.has_minimum_activity,
            "hasDeployedContracts": self.has_deployed_contracts,
            "hasMinimumBalance": self.has_minimum_balance,
            "overallEligible": self.overall_eligible,
            "activityScore": self.activity_score,
        }


def activity_score(deployed_contract_count: int, wallet_initialized: bool) -> int:
    """
    Heuristic builder score in [0, 1000].

    The score saturates: from 20 deployed contracts on it is always 1000.
    """
    check_quantity("deployed_contract_count", deployed_contract_count)
    score = deployed_contract_count * CONTRACT_WEIGHT + BASELINE_SCORE
    if wallet_initialized:
        score += WALLET_BONUS
    return min(score, MAX_ACTIVITY_SCORE)


def compute_eligibility(
    snapshot: ActivitySnapshot,
    thresholds: EligibilityThresholds | Mapping[str, Any] | None = None,
) -> EligibilityResult:
    """
    Evaluate builder rewards eligibility for an activity snapshot.

    Args:
        snapshot: Activity of the address under evaluation
        thresholds: Eligibility thresholds or a mapping of their fields
            (defaults: 10 tx, 1 contract, 0.01 ETH)

    Returns:
        EligibilityResult with the three predicates and the activity score

    Raises:
        InvalidInput: If the snapshot or thresholds are malformed
    """
    if not isinstance(snapshot, ActivitySnapshot):
        raise InvalidInput(f"Expected ActivitySnapshot, got {type(snapshot).__name__}")
    if thresholds is None:
        thresholds = EligibilityThresholds()
    elif isinstance(thresholds, Mapping):
        thresholds = EligibilityThresholds.from_dict(thresholds)
    elif not isinstance(thresholds, EligibilityThresholds):
        raise InvalidInput(f"Expected EligibilityThresholds, got {type(thresholds).__name__}")

    balance_ether = Fraction(snapshot.balance, WEI_PER_ETHER)

    return EligibilityResult(
        has_minimum_activity=snapshot.transaction_count >= thresholds.min_tx,
        has_deployed_contracts=snapshot.deployed_contract_count >= thresholds.min_contracts,
        has_minimum_balance=balance_ether >= Fraction(thresholds.min_balance),
        activity_score=activity_score(snapshot.deployed_contract_count, snapshot.wallet_initialized),
    )


def recommendations(result: EligibilityResult) -> list[str]:
    """Suggestions for improving a builder's eligibility."""
    hints = []
    if not result.has_minimum_activity:
        hints.append("Increase transaction activity on Base network")
    if not result.has_deployed_contracts:
        hints.append("Deploy smart contracts to demonstrate building activity")
    if not result.has_minimum_balance:
        hints.append("Maintain minimum ETH balance for gas fees")
    if result.overall_eligible:
        hints.append("Continue consistent building activity for maximum rewards")
    return hints
