"""
Status - Network status and account balance.
"""

from __future__ import annotations

from typing import Optional

import click

from ..chain.tracker import BuilderTracker
from ..chain.wallet import get_address
from ..errors import InvalidInput
from ..networks import address_url
from ..utils import format_balance, is_valid_address, to_gwei
from .common import make_client, network_options, reported_errors


@click.command()
@network_options
def status(network: str, rpc_url: Optional[str]) -> None:
    """Show network name, chain ID and latest block."""
    with reported_errors():
        info = BuilderTracker(make_client(network, rpc_url)).network_status()

    click.echo(click.style("  Network:     ", dim=True) + info["network"])
    click.echo(click.style("  Chain ID:    ", dim=True) + str(info["chainId"]))
    click.echo(click.style("  Block:       ", dim=True) + str(info["blockNumber"]))
    click.echo(click.style("  Gas price:   ", dim=True) + f"{to_gwei(info['gasPrice']):f} gwei")
    click.echo(click.style("  Status:      ", dim=True) + click.style(info["status"], fg="green"))


@click.command()
@click.argument("address", required=False)
@network_options
def balance(address: Optional[str], network: str, rpc_url: Optional[str]) -> None:
    """Show the ETH balance of ADDRESS (default: your wallet)."""
    with reported_errors():
        address = address or get_address()
        if not is_valid_address(address):
            raise InvalidInput(f"Not a valid address: {address!r}")
        client = make_client(network, rpc_url)
        wei = client.get_balance(address)

    click.echo(click.style("  Address: ", dim=True) + address)
    click.echo(click.style("  Balance: ", dim=True) + f"{format_balance(wei)} ETH")
    click.echo(click.style("  ", dim=True) + address_url(address, client.network))
