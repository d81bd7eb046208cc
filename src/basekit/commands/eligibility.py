"""
Eligibility - Builder rewards eligibility check.

The deployed-contract count must be supplied by the caller (from an indexer
or explorer); it cannot be derived from plain JSON-RPC.
"""

from __future__ import annotations

import json
from typing import Optional

import click

from ..chain.tracker import BuilderTracker
from ..chain.wallet import has_signing_credential
from ..estimator import MAX_ACTIVITY_SCORE, EligibilityThresholds
from .common import make_client, network_options, reported_errors


def _mark(ok: bool) -> str:
    return click.style("yes", fg="green") if ok else click.style("no", fg="red")


@click.command()
@click.argument("address")
@click.option("--contracts", "contract_count", required=True, type=int,
              help="Number of contracts deployed by ADDRESS")
@click.option("--min-tx", default=10, show_default=True, type=int, help="Minimum transaction count")
@click.option("--min-contracts", default=1, show_default=True, type=int, help="Minimum deployed contracts")
@click.option("--min-balance", default="0.01", show_default=True, help="Minimum balance in ETH")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@network_options
def eligibility(
    address: str,
    contract_count: int,
    min_tx: int,
    min_contracts: int,
    min_balance: str,
    as_json: bool,
    network: str,
    rpc_url: Optional[str],
) -> None:
    """Check builder rewards eligibility for ADDRESS."""
    with reported_errors():
        thresholds = EligibilityThresholds(
            min_tx=min_tx, min_contracts=min_contracts, min_balance=min_balance
        )
        tracker = BuilderTracker(make_client(network, rpc_url))
        report = tracker.check_eligibility(
            address,
            deployed_contract_count=contract_count,
            wallet_initialized=has_signing_credential(),
            thresholds=thresholds,
        )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    result = report.result
    click.echo(f"=== Builder Eligibility ({report.network}) ===")
    click.echo()
    click.echo(click.style("  Address:       ", dim=True) + address)
    click.echo(click.style("  Transactions:  ", dim=True) + str(report.snapshot.transaction_count))
    click.echo(click.style("  Contracts:     ", dim=True) + str(report.snapshot.deployed_contract_count))
    click.echo(click.style("  Balance:       ", dim=True) + f"{report.snapshot.balance_ether.normalize():f} ETH")
    click.echo()
    click.echo(click.style("  Min activity:  ", dim=True) + _mark(result.has_minimum_activity))
    click.echo(click.style("  Contracts:     ", dim=True) + _mark(result.has_deployed_contracts))
    click.echo(click.style("  Min balance:   ", dim=True) + _mark(result.has_minimum_balance))
    click.echo(
        click.style("  Score:         ", dim=True)
        + click.style(f"{result.activity_score}/{MAX_ACTIVITY_SCORE}", fg="bright_white", bold=True)
    )
    click.echo()
    if result.overall_eligible:
        click.secho("  ELIGIBLE", fg="green", bold=True)
    else:
        click.secho("  NOT ELIGIBLE", fg="yellow", bold=True)
    for hint in report.recommendations:
        click.echo(click.style("  - ", fg="cyan") + hint)
    click.echo()
