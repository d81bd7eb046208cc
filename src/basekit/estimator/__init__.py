"""
Estimator - Pure fee tiering and builder activity scoring.

Nothing in this package performs I/O; every function is deterministic and
safe to call concurrently.
"""

from .eligibility import (
    MAX_ACTIVITY_SCORE,
    ActivitySnapshot,
    EligibilityResult,
    EligibilityThresholds,
    activity_score,
    compute_eligibility,
    recommendations,
)
from .fees import (
    DEFAULT_FAST_MULTIPLIER,
    TIER_NAMES,
    FeeObservation,
    FeeSchedule,
    FeeTier,
    buffered_gas_limit,
    compute_fee_schedule,
)

__all__ = [
    "MAX_ACTIVITY_SCORE",
    "ActivitySnapshot",
    "EligibilityResult",
    "EligibilityThresholds",
    "activity_score",
    "compute_eligibility",
    "recommendations",
    "DEFAULT_FAST_MULTIPLIER",
    "TIER_NAMES",
    "FeeObservation",
    "FeeSchedule",
    "FeeTier",
    "buffered_gas_limit",
    "compute_fee_schedule",
]
