"""
Account commands - Query and fund the stored wallet's account.

Commands:
- info:  Validated account_info for the wallet
- fund:  Request test funds from the faucet (test networks only)
- nfts:  List NFTs owned by an account, one page or all pages
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..ledger.errors import NetworkConfigError
from ..ledger.networks import resolve_endpoint
from ._common import connected_client, echo_json, network_option


@click.group()
def account() -> None:
    """Account queries and faucet funding."""
    pass


@account.command("info")
@network_option
def account_info(network: str) -> None:
    """Show validated account state for your wallet."""
    with connected_client(network) as client:
        response = client.get_account_info()
        echo_json(response.result)


@account.command("fund")
@network_option
@click.option(
    "--faucet-host",
    envvar="XRPL_FAUCET_HOST",
    default=None,
    help="Faucet host for a custom endpoint",
)
def account_fund(network: str, faucet_host: Optional[str]) -> None:
    """Fund your wallet from the test network faucet."""
    endpoint = resolve_endpoint(network, faucet_host)
    if not endpoint.is_test:
        click.secho(f"ERROR: Funding only works on test networks, not {endpoint.name}", fg="red")
        sys.exit(NetworkConfigError.exit_code)

    with connected_client(network, faucet_host=faucet_host) as client:
        click.echo(f"  Funding {client.address} on {client.endpoint.name}...")
        client.fund_wallet()
        click.secho("  Wallet funded!", fg="green")


@account.command("nfts")
@network_option
@click.option("--address", default=None, help="Account to list (default: your wallet)")
@click.option("--limit", type=int, default=None, help="Page size, 32-400 (default: 100)")
@click.option("--marker", default=None, help="Marker from a previous page")
@click.option("--all", "list_all", is_flag=True, help="Follow markers and list every NFT")
def account_nfts(
    network: str,
    address: Optional[str],
    limit: Optional[int],
    marker: Optional[str],
    list_all: bool,
) -> None:
    """List NFTs owned by an account.

    \b
    Examples:
      xls20 account nfts
      xls20 account nfts --limit 400 --marker <marker>
      xls20 account nfts --address r... --all
    """
    with connected_client(network) as client:
        if list_all:
            nfts = client.get_all_account_nfts(address)
            echo_json(nfts)
            click.echo(f"Total: {len(nfts)}")
            return

        response = client.get_account_nfts(address, limit, marker)
        echo_json(response.result.get("account_nfts", response.result))
        next_marker = response.result.get("marker")
        if next_marker is not None:
            click.echo(f"Next marker: {next_marker}")
