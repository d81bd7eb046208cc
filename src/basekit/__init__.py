__all__ = [
    # Errors
    "BaseKitError",
    "InvalidInput",
    "RpcError",
    "WalletError",
    # Estimator
    "ActivitySnapshot",
    "EligibilityResult",
    "EligibilityThresholds",
    "FeeObservation",
    "FeeSchedule",
    "FeeTier",
    "activity_score",
    "buffered_gas_limit",
    "compute_eligibility",
    "compute_fee_schedule",
    "recommendations",
    # Networks
    "NETWORKS",
    "NetworkConfig",
    "get_network",
    "resolve_network",
    # Chain
    "BuilderTracker",
    "ChainClient",
    "EligibilityReport",
]

from .errors import BaseKitError, InvalidInput, RpcError, WalletError
from .estimator import (
    ActivitySnapshot,
    EligibilityResult,
    EligibilityThresholds,
    FeeObservation,
    FeeSchedule,
    FeeTier,
    activity_score,
    buffered_gas_limit,
    compute_eligibility,
    compute_fee_schedule,
    recommendations,
)
from .networks import NETWORKS, NetworkConfig, get_network, resolve_network
from .chain.rpc import ChainClient
from .chain.tracker import BuilderTracker, EligibilityReport
