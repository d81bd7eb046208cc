"""
basekit CLI

Command-line interface for Base network fee estimation and builder
rewards tracking.

Commands:
  fees         - Tiered gas fee recommendations
  eligibility  - Builder rewards eligibility and activity score
  status       - Network status
  balance      - ETH balance of an address
  whoami       - Show current wallet address
  info         - Show configuration
"""

from __future__ import annotations

import os
import sys

import click

from .chain.wallet import BASEKIT_ENV, get_address
from .commands.common import reported_errors
from .errors import WalletError
from .networks import get_rpc_url, resolve_network


# ============ Constants ============

VERSION = "0.3.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="blue")
    click.echo()
    click.echo(border)
    click.echo(
        click.style("        B A S E K I T", fg="bright_white", bold=True)
        + click.style(f"        v{VERSION}", dim=True)
    )
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="basekit")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """basekit — Base network fee and builder toolkit."""
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.fees import fees
from .commands.eligibility import eligibility
from .commands.status import balance, status

cli.add_command(fees)
cli.add_command(eligibility)
cli.add_command(status)
cli.add_command(balance)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show current wallet identity."""
    try:
        click.echo(f"Address: {get_address()}")
    except WalletError:
        click.echo("No wallet found.")
        click.echo(f"Set PRIVATE_KEY in the environment or in {BASEKIT_ENV}.")
        sys.exit(1)


# ============ Info ============


@cli.command()
def info() -> None:
    """Show configuration."""
    _print_banner()

    with reported_errors():
        network = resolve_network(os.environ.get("BASE_NETWORK"))
    click.secho("  Network ────────────────────────────────", fg="blue")
    click.echo(click.style("  Name:      ", dim=True) + f"{network.name} ({network.key})")
    click.echo(click.style("  Chain ID:  ", dim=True) + str(network.chain_id))
    click.echo(click.style("  RPC:       ", dim=True) + get_rpc_url(network))
    click.echo(click.style("  Explorer:  ", dim=True) + network.explorer_url)
    click.echo()

    click.secho("  Wallet ─────────────────────────────────", fg="blue")
    try:
        address = get_address()
        click.echo(click.style("  Address:   ", dim=True) + click.style(address, fg="bright_white"))
    except WalletError:
        click.echo(
            click.style("  Address:   ", dim=True)
            + click.style("not configured", fg="yellow")
            + click.style(f"  (set PRIVATE_KEY in {BASEKIT_ENV})", dim=True)
        )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """basekit CLI entry point."""
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
