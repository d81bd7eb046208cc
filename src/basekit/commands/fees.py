"""
Fees - Tiered gas fee recommendations.

Reads the latest base fee and suggested priority fee and prints slow,
standard and fast fee caps.
"""

from __future__ import annotations

from typing import Optional

import click

from ..chain.tracker import BuilderTracker
from ..estimator import DEFAULT_FAST_MULTIPLIER, TIER_NAMES
from ..utils import to_gwei
from .common import make_client, network_options, reported_errors


@click.command()
@click.option(
    "--fast-multiplier",
    default=str(DEFAULT_FAST_MULTIPLIER),
    show_default=True,
    help="Multiplier for the fast tier (must be > 1)",
)
@network_options
def fees(fast_multiplier: str, network: str, rpc_url: Optional[str]) -> None:
    """Show slow / standard / fast fee recommendations."""
    with reported_errors():
        tracker = BuilderTracker(make_client(network, rpc_url))
        schedule = tracker.optimal_fees(fast_multiplier)

        click.echo(f"=== Gas Fees ({tracker.client.network.name}) ===")
        click.echo()
        for name in TIER_NAMES:
            tier = schedule.tier(name)
            click.echo(
                click.style(f"  {name:<9}", fg="bright_white", bold=True)
                + click.style("max fee ", dim=True)
                + f"{to_gwei(tier.fee_cap + tier.priority_cap):f} gwei"
                + click.style("  priority ", dim=True)
                + f"{to_gwei(tier.priority_cap):f} gwei"
            )
        click.echo()
