"""
Signing credential handling.

A credential is optional: read-only commands work without one, and its
presence is what counts as an initialized wallet for activity scoring.
Keys are read from the environment or ~/.basekit/.env as PRIVATE_KEY.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..errors import WalletError

BASEKIT_DIR = Path.home() / ".basekit"
BASEKIT_ENV = BASEKIT_DIR / ".env"


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ~/.basekit/.env)

    Returns:
        0x-prefixed hex private key

    Raises:
        WalletError: If PRIVATE_KEY is not configured
    """
    env_path = env_path or BASEKIT_ENV

    if env_path.exists():
        load_dotenv(env_path, override=False)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise WalletError(f"PRIVATE_KEY not found. Set it in the environment or in {env_path}")

    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


def has_signing_credential(env_path: Optional[Path] = None) -> bool:
    try:
        load_private_key(env_path)
    except WalletError:
        return False
    return True


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    """
    Get an eth-account LocalAccount from a private key.

    Args:
        private_key: 0x-prefixed hex private key. If None, loads from .env.

    Raises:
        WalletError: If no key is configured or the key is malformed
    """
    if private_key is None:
        private_key = load_private_key()
    try:
        return Account.from_key(private_key)
    except Exception as exc:
        raise WalletError(f"Invalid private key: {exc}") from exc


def get_address(private_key: Optional[str] = None) -> str:
    """Checksummed address for a private key (loads from .env when None)."""
    return get_account(private_key).address
