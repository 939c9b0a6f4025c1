"""
Offer - NFT offer lifecycle.

Commands:
- sell:        Create a sell offer (optionally restricted to --destination)
- buy:         Create a buy offer on another account's NFT
- accept-buy:  Accept a buy offer (sell your NFT)
- accept-sell: Accept a sell offer (buy the NFT)
- broker:      Match a buy and a sell offer, keeping an optional fee
- cancel:      Cancel one or more offers

Prices are in drops; grouping separators ("1_000_000") are allowed.
"""

from __future__ import annotations

from typing import Optional

import click

from ._common import connected_client, echo_outcome, network_option


def _expiration_option(func):
    return click.option(
        "--expiration",
        type=int,
        default=None,
        help="Deadline in seconds since the Ripple epoch (default: none)",
    )(func)


@click.group()
def offer() -> None:
    """Create, accept, broker and cancel NFT offers.

    \b
    Examples:
      xls20 offer sell --token-id 000800... --price 1_000_000
      xls20 offer buy --token-id 000800... --price 500000 --owner r...
      xls20 offer broker --buy-offer ABC... --sell-offer DEF... --broker-fee 1000
      xls20 offer cancel ABC... DEF...
    """
    pass


@offer.command()
@click.option("--token-id", required=True, help="NFTokenID to sell")
@click.option("--price", required=True, help="Sale price in drops")
@click.option("--destination", default=None, help="Only this account may accept")
@_expiration_option
@network_option
def sell(
    token_id: str,
    price: str,
    destination: Optional[str],
    expiration: Optional[int],
    network: str,
) -> None:
    """Create a sell offer for one of your NFTs."""
    with connected_client(network) as client:
        if destination:
            response = client.create_whitelist_sell_offer(
                token_id, price, destination, expiration=expiration
            )
        else:
            response = client.create_sell_offer(token_id, price, expiration=expiration)
        echo_outcome(response)


@offer.command()
@click.option("--token-id", required=True, help="NFTokenID to buy")
@click.option("--price", required=True, help="Purchase price in drops")
@click.option("--owner", required=True, help="Current holder of the NFT")
@_expiration_option
@network_option
def buy(
    token_id: str,
    price: str,
    owner: str,
    expiration: Optional[int],
    network: str,
) -> None:
    """Create a buy offer for another account's NFT."""
    with connected_client(network) as client:
        response = client.create_buy_offer(token_id, price, expiration=expiration, owner=owner)
        echo_outcome(response)


@offer.command("accept-buy")
@click.argument("offer_id")
@network_option
def accept_buy(offer_id: str, network: str) -> None:
    """Accept a buy offer, selling your NFT."""
    with connected_client(network) as client:
        echo_outcome(client.accept_buy_offer(offer_id))


@offer.command("accept-sell")
@click.argument("offer_id")
@network_option
def accept_sell(offer_id: str, network: str) -> None:
    """Accept a sell offer, buying the NFT."""
    with connected_client(network) as client:
        echo_outcome(client.accept_sell_offer(offer_id))


@offer.command()
@click.option("--buy-offer", "buy_offer_id", required=True, help="Buy offer ID")
@click.option("--sell-offer", "sell_offer_id", required=True, help="Sell offer ID")
@click.option("--broker-fee", default=None, help="Fee kept by the broker, in drops")
@network_option
def broker(
    buy_offer_id: str,
    sell_offer_id: str,
    broker_fee: Optional[str],
    network: str,
) -> None:
    """Match a buy and a sell offer as a broker."""
    with connected_client(network) as client:
        echo_outcome(client.broker_nft_sale(buy_offer_id, sell_offer_id, broker_fee))


@offer.command()
@click.argument("offer_ids", nargs=-1, required=True)
@network_option
def cancel(offer_ids: tuple[str, ...], network: str) -> None:
    """Cancel one or more offers."""
    with connected_client(network) as client:
        echo_outcome(client.cancel_offers(list(offer_ids)))
