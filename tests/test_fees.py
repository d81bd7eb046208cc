"""Unit tests for fee tiering."""

from __future__ import annotations

from decimal import Decimal

import pytest

from basekit.errors import InvalidInput
from basekit.estimator import (
    FeeObservation,
    FeeSchedule,
    FeeTier,
    buffered_gas_limit,
    compute_fee_schedule,
)


class TestComputeFeeSchedule:
    """Tests for compute_fee_schedule."""

    def test_one_gwei_default_multiplier(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=1_000_000_000))
        assert schedule.slow.fee_cap == 900_000_000
        assert schedule.standard.fee_cap == 1_000_000_000
        assert schedule.fast.fee_cap == 1_250_000_000

    def test_missing_priority_fee_is_zero(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=1_000_000_000))
        assert schedule.slow.priority_cap == 0
        assert schedule.standard.priority_cap == 0
        assert schedule.fast.priority_cap == 0

    def test_zero_base_fee(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=0))
        for tier in (schedule.slow, schedule.standard, schedule.fast):
            assert tier == FeeTier(0, 0)

    def test_priority_fee_scaled_independently(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=100, priority_fee=2_000_000_000))
        assert schedule.slow.priority_cap == 1_800_000_000
        assert schedule.standard.priority_cap == 2_000_000_000
        assert schedule.fast.priority_cap == 2_500_000_000

    def test_truncates_toward_zero(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=7, priority_fee=3))
        # 7 * 0.9 = 6.3, 7 * 1.25 = 8.75
        assert schedule.slow.fee_cap == 6
        assert schedule.fast.fee_cap == 8
        # 3 * 0.9 = 2.7, 3 * 1.25 = 3.75
        assert schedule.slow.priority_cap == 2
        assert schedule.fast.priority_cap == 3

    def test_float_multiplier_uses_decimal_value(self) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=100), fast_multiplier=1.1)
        assert schedule.fast.fee_cap == 110

    @pytest.mark.parametrize("multiplier", [Decimal("1.1"), "1.10", 2, Decimal("1.0000001")])
    def test_accepted_multiplier_types(self, multiplier) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee=10**9), fast_multiplier=multiplier)
        assert schedule.fast.fee_cap > schedule.standard.fee_cap

    def test_large_values_stay_exact(self) -> None:
        base = 10**40 + 7
        schedule = compute_fee_schedule(FeeObservation(base_fee=base))
        assert schedule.slow.fee_cap == base * 9 // 10
        assert schedule.fast.fee_cap == base * 5 // 4

    @pytest.mark.parametrize("base_fee", [0, 1, 9, 10, 11, 999, 12_345_678_901, 10**18])
    @pytest.mark.parametrize("multiplier", ["1.01", "1.1", "1.25", "3"])
    def test_tiers_are_monotonic(self, base_fee: int, multiplier: str) -> None:
        schedule = compute_fee_schedule(FeeObservation(base_fee, base_fee // 3), fast_multiplier=multiplier)
        assert schedule.slow.fee_cap <= schedule.standard.fee_cap <= schedule.fast.fee_cap
        assert schedule.slow.priority_cap <= schedule.standard.priority_cap <= schedule.fast.priority_cap

    def test_repeated_calls_identical(self) -> None:
        observation = FeeObservation(base_fee=123_456_789, priority_fee=1_000)
        assert compute_fee_schedule(observation) == compute_fee_schedule(observation)


class TestInvalidFeeInput:
    """Invalid observations and multipliers raise InvalidInput."""

    @pytest.mark.parametrize("base_fee", [-1, -(10**18)])
    def test_negative_base_fee(self, base_fee: int) -> None:
        with pytest.raises(InvalidInput):
            FeeObservation(base_fee=base_fee)

    def test_negative_priority_fee(self) -> None:
        with pytest.raises(InvalidInput):
            FeeObservation(base_fee=1, priority_fee=-5)

    @pytest.mark.parametrize("base_fee", [float("inf"), float("nan"), 1.5, "100", True, None])
    def test_non_integer_base_fee(self, base_fee) -> None:
        with pytest.raises(InvalidInput):
            FeeObservation(base_fee=base_fee)

    @pytest.mark.parametrize("multiplier", [1, "1.0", Decimal("0.9"), 0, -2, float("inf"), float("nan"), "fast", True])
    def test_bad_multiplier(self, multiplier) -> None:
        with pytest.raises(InvalidInput):
            compute_fee_schedule(FeeObservation(base_fee=100), fast_multiplier=multiplier)

    def test_not_an_observation(self) -> None:
        with pytest.raises(InvalidInput):
            compute_fee_schedule({"base_fee": 100})  # type: ignore[arg-type]

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FeeObservation(base_fee=-1)


class TestFeeObservationFromDict:
    def test_valid(self) -> None:
        obs = FeeObservation.from_dict({"base_fee": 10, "priority_fee": 2})
        assert obs == FeeObservation(10, 2)

    def test_unknown_field(self) -> None:
        with pytest.raises(InvalidInput, match="Unknown"):
            FeeObservation.from_dict({"base_fee": 10, "baseFee": 10})

    def test_missing_base_fee(self) -> None:
        with pytest.raises(InvalidInput):
            FeeObservation.from_dict({"priority_fee": 2})


class TestFeeSchedule:
    def _schedule(self) -> FeeSchedule:
        return compute_fee_schedule(FeeObservation(base_fee=1_000, priority_fee=100))

    def test_tier_lookup(self) -> None:
        schedule = self._schedule()
        assert schedule.tier("fast") is schedule.fast

    def test_unknown_tier(self) -> None:
        with pytest.raises(InvalidInput):
            self._schedule().tier("instant")

    def test_tx_params_include_tip(self) -> None:
        params = self._schedule().standard.to_tx_params()
        assert params == {"maxFeePerGas": 1_100, "maxPriorityFeePerGas": 100}

    def test_to_dict(self) -> None:
        data = self._schedule().to_dict()
        assert data["slow"] == {"fee_cap": 900, "priority_cap": 90}
        assert set(data) == {"slow", "standard", "fast"}


class TestBufferedGasLimit:
    def test_default_buffer(self) -> None:
        assert buffered_gas_limit(21_000) == 25_200

    def test_custom_buffer(self) -> None:
        assert buffered_gas_limit(100_000, buffer_percent=0) == 100_000
        assert buffered_gas_limit(99, buffer_percent=50) == 148

    def test_negative_estimate(self) -> None:
        with pytest.raises(InvalidInput):
            buffered_gas_limit(-1)
