"""Shared option handling for chain-backed commands."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import click
import httpx

from ..chain.rpc import ChainClient
from ..errors import BaseKitError
from ..networks import NETWORKS, resolve_network


def network_options(func: Callable) -> Callable:
    func = click.option(
        "--rpc-url",
        envvar="BASE_RPC_URL",
        default=None,
        help="RPC endpoint (default: the network's public endpoint)",
    )(func)
    func = click.option(
        "--network",
        envvar="BASE_NETWORK",
        type=click.Choice(sorted(NETWORKS)),
        default="mainnet",
        show_default=True,
        help="Base network",
    )(func)
    return func


def make_client(network: str, rpc_url: Optional[str]) -> ChainClient:
    return ChainClient(network=resolve_network(network), rpc_url=rpc_url)


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn library errors into a red message and the matching exit code."""
    try:
        yield
    except BaseKitError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except httpx.HTTPError as exc:
        click.secho(f"ERROR: RPC request failed: {exc}", fg="red")
        sys.exit(3)
