"""
basekit error hierarchy.

Library code raises these; the CLI maps ``exit_code`` to the process exit
status.
"""

from __future__ import annotations


class BaseKitError(RuntimeError):
    exit_code: int = 1


class InvalidInput(BaseKitError, ValueError):
    """Malformed or out-of-domain argument detected at a function boundary."""

    exit_code = 2


class RpcError(BaseKitError):
    """JSON-RPC endpoint returned an error object or an unusable result."""

    exit_code = 3


class WalletError(BaseKitError):
    exit_code = 4
