"""Shared plumbing for commands that talk to the ledger."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import click
from xrpl.models.response import Response

from ..identity.wallet import load_seed
from ..ledger.client import LedgerOfferClient
from ..ledger.errors import XLS20Error
from ..ledger.networks import DEFAULT_NETWORK
from ..utils import balance_changes, is_success, transaction_hash, transaction_result


def network_option(func: Callable) -> Callable:
    return click.option(
        "--network",
        envvar="XRPL_NETWORK",
        default=DEFAULT_NETWORK,
        show_default=True,
        help="Devnet, Testnet, Mainnet or a websocket URL",
    )(func)


@contextmanager
def connected_client(network: str, faucet_host: Optional[str] = None) -> Iterator[LedgerOfferClient]:
    """Open a client for the stored wallet; exit with a message on failure."""
    try:
        seed = load_seed()
    except (ValueError, FileNotFoundError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    client = LedgerOfferClient(network, seed, faucet_host=faucet_host)
    try:
        client.connect()
    except Exception as exc:
        click.secho(f"ERROR: Could not connect to {client.endpoint.url}: {exc}", fg="red")
        sys.exit(1)

    try:
        yield client
    except XLS20Error as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except Exception as exc:
        click.secho(f"Request failed: {exc}", fg="red")
        sys.exit(1)
    finally:
        client.disconnect()


def echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def echo_outcome(response: Response) -> None:
    """Print result code, hash and balance changes; exit 1 on failure."""
    code = transaction_result(response) or "unknown"
    if is_success(response):
        click.secho(f"  Transaction result: {code}", fg="green")
    else:
        click.secho(f"  Transaction result: {code}", fg="red")
    click.echo(click.style("  TX: ", dim=True) + (transaction_hash(response) or "unknown"))

    changes = balance_changes(response)
    if changes:
        click.echo(click.style("  Balance changes:", dim=True))
        echo_json(changes)

    if not is_success(response):
        sys.exit(1)
