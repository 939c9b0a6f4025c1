"""
Mint - Create an XLS-20 NFT from the stored wallet.

The URI is hex-encoded onto the ledger with taxon 0.  Prints the result
code, balance changes and the new NFTokenID.
"""

from __future__ import annotations

import click

from ..ledger.intents import DEFAULT_MINT_FLAGS
from ..utils import minted_token_id
from ._common import connected_client, echo_outcome, network_option


@click.command()
@click.option("--uri", required=True, help="Metadata URI stored with the NFT")
@click.option(
    "--transfer-fee",
    type=click.IntRange(0, 50_000),
    default=0,
    show_default=True,
    help="Royalty in tenths of a basis point (5000 == 5%)",
)
@click.option(
    "--flags",
    type=int,
    default=DEFAULT_MINT_FLAGS,
    show_default=True,
    help="NFTokenMint flags (9 = burnable + transferable)",
)
@network_option
def mint(uri: str, transfer_fee: int, flags: int, network: str) -> None:
    """Mint an NFT."""
    with connected_client(network) as client:
        click.echo(f"  Minting from {client.address}")
        click.echo(click.style("  URI: ", dim=True) + uri)
        response = client.mint(transfer_fee, flags, uri)

        token_id = minted_token_id(response)
        if token_id:
            click.echo(click.style("  NFTokenID: ", dim=True) + click.style(token_id, fg="bright_white"))
        echo_outcome(response)
