from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal, ROUND_DOWN
from fractions import Fraction

WEI_PER_ETHER = 10**18
WEI_PER_GWEI = 10**9

_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def is_valid_address(address: str) -> bool:
    return isinstance(address, str) and bool(_ADDRESS_RE.fullmatch(address))


def utc_now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def to_wei(ether: Decimal | int | str) -> int:
    """Convert an ether amount to wei, truncating below 1 wei."""
    value = Fraction(Decimal(str(ether))) * WEI_PER_ETHER
    return value.numerator // value.denominator


def from_wei(wei: int) -> Decimal:
    """Exact decimal ether value of a wei amount."""
    return Decimal(wei).scaleb(-18)


def to_gwei(wei: int) -> Decimal:
    return Decimal(wei).scaleb(-9)


def format_balance(wei: int, places: int = 4) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(from_wei(wei).quantize(quantum, rounding=ROUND_DOWN))


def hex_to_int(value: str) -> int:
    return int(value, 16)
