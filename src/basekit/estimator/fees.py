"""
Fee tiering for EIP-1559 style fee observations.

All arithmetic stays in the integer / rational domain: fee amounts are wei
integers and percentage multipliers are exact fractions, so a tier is always
``floor(amount * ratio)`` and never rounds up past the observed fee.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Mapping, Optional, Union

from ..errors import InvalidInput

Number = Union[int, float, Decimal, str]

SLOW_RATIO = Fraction(9, 10)
DEFAULT_FAST_MULTIPLIER = Decimal("1.25")
DEFAULT_GAS_BUFFER_PERCENT = 20

TIER_NAMES = ("slow", "standard", "fast")


def check_quantity(name: str, value: Any) -> int:
    """Validate a non-negative integer quantity (wei, counts)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be a non-negative integer, got {value!r}")
    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")
    return value


def as_decimal(name: str, value: Any) -> Decimal:
    """
    Coerce a user-facing decimal setting to ``Decimal``.

    Floats are taken by their shortest repr, so ``1.1`` means exactly 11/10.

    Raises:
        InvalidInput: For booleans, unparseable strings, NaN and infinities.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInput(f"{name} must be finite, got {value!r}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidInput(f"{name} is not a number: {value!r}") from None
    else:
        raise InvalidInput(f"{name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return result


def _scale(amount: int, ratio: Fraction) -> int:
    return amount * ratio.numerator // ratio.denominator


@dataclass(frozen=True)
class FeeObservation:
    """
    A fee reading from the chain.

    Attributes:
        base_fee: Base fee per gas in wei
        priority_fee: Priority fee per gas in wei (treated as 0 when absent)
    """
    base_fee: int
    priority_fee: Optional[int] = None

    def __post_init__(self) -> None:
        check_quantity("base_fee", self.base_fee)
        if self.priority_fee is not None:
            check_quantity("priority_fee", self.priority_fee)

    @property
    def effective_priority_fee(self) -> int:
        return self.priority_fee or 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FeeObservation":
        unknown = set(payload) - {"base_fee", "priority_fee"}
        if unknown:
            raise InvalidInput(f"Unknown fee observation fields: {sorted(unknown)}")
        if "base_fee" not in payload:
            raise InvalidInput("base_fee is required")
        return cls(base_fee=payload["base_fee"], priority_fee=payload.get("priority_fee"))


@dataclass(frozen=True)
class FeeTier:
    fee_cap: int
    priority_cap: int

    def to_tx_params(self) -> dict[str, int]:
        """
        EIP-1559 fee fields for this tier.

        Returns:
            Dict with maxFeePerGas (fee_cap plus priority_cap) and
            maxPriorityFeePerGas (priority_cap)
        """
        return {
            "maxFeePerGas": self.fee_cap + self.priority_cap,
            "maxPriorityFeePerGas": self.priority_cap,
        }


@dataclass(frozen=True)
class FeeSchedule:
    slow: FeeTier
    standard: FeeTier
    fast: FeeTier

    def tier(self, name: str) -> FeeTier:
        if name not in TIER_NAMES:
            raise InvalidInput(f"Unknown fee tier {name!r} (expected one of: {', '.join(TIER_NAMES)})")
        return getattr(self, name)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {name: asdict(self.tier(name)) for name in TIER_NAMES}


def compute_fee_schedule(
    observation: FeeObservation,
    fast_multiplier: Number = DEFAULT_FAST_MULTIPLIER,
) -> FeeSchedule:
    """
    Derive slow / standard / fast fee caps from a fee observation.

    slow is 90% of the observation, standard is the observation itself and
    fast is ``fast_multiplier`` times it; base and priority fees are scaled
    independently and every product is floored.

    Args:
        observation: Current fee reading
        fast_multiplier: Multiplier for the fast tier, must be > 1

    Returns:
        FeeSchedule with slow <= standard <= fast for both components

    Raises:
        InvalidInput: On a malformed observation or a multiplier <= 1
    """
    if not isinstance(observation, FeeObservation):
        raise InvalidInput(f"Expected FeeObservation, got {type(observation).__name__}")
    base_fee = check_quantity("base_fee", observation.base_fee)
    priority_fee = check_quantity("priority_fee", observation.effective_priority_fee)

    multiplier = as_decimal("fast_multiplier", fast_multiplier)
    if multiplier <= 1:
        raise InvalidInput(f"fast_multiplier must be greater than 1, got {multiplier}")
    fast_ratio = Fraction(multiplier)

    return FeeSchedule(
        slow=FeeTier(_scale(base_fee, SLOW_RATIO), _scale(priority_fee, SLOW_RATIO)),
        standard=FeeTier(base_fee, priority_fee),
        fast=FeeTier(_scale(base_fee, fast_ratio), _scale(priority_fee, fast_ratio)),
    )


def buffered_gas_limit(estimate: int, buffer_percent: int = DEFAULT_GAS_BUFFER_PERCENT) -> int:
    """Pad a gas estimate by ``buffer_percent`` percent (floored)."""
    check_quantity("estimate", estimate)
    check_quantity("buffer_percent", buffer_percent)
    return estimate * (100 + buffer_percent) // 100
