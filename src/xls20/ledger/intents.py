"""
NFT lifecycle intents.

An intent is an immutable, validated description of one ledger change
(mint, create offer, accept, burn, cancel) before signing.  Each intent
renders to the matching xrpl-py transaction model.  Validation that does
not need the network happens at construction, so a bad request never
reaches the transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from xrpl.models.exceptions import XRPLModelException
from xrpl.models.transactions import (
    NFTokenAcceptOffer,
    NFTokenBurn,
    NFTokenCancelOffer,
    NFTokenCreateOffer,
    NFTokenCreateOfferFlag,
    NFTokenMint,
    NFTokenMintFlag,
)
from xrpl.models.transactions.transaction import Transaction

from ..utils import encode_uri
from .errors import RequestValidationError

# Burnable + transferable
DEFAULT_MINT_FLAGS = int(NFTokenMintFlag.TF_BURNABLE) | int(NFTokenMintFlag.TF_TRANSFERABLE)

SELL_FLAG = int(NFTokenCreateOfferFlag.TF_SELL_NFTOKEN)
BUY_FLAG = 0

MIN_PAGE_SIZE = 32
MAX_PAGE_SIZE = 400
DEFAULT_PAGE_SIZE = 100


def _build(model: type[Transaction], **fields: Any) -> Transaction:
    """Instantiate an xrpl-py model, dropping unset fields."""
    values = {k: v for k, v in fields.items() if v is not None}
    try:
        return model(**values)
    except XRPLModelException as exc:
        raise RequestValidationError(f"Invalid {model.__name__}: {exc}") from exc


@dataclass(frozen=True)
class MintIntent:
    account: str
    uri: str
    flags: int
    transfer_fee: int
    taxon: int = 0

    def to_transaction(self) -> Transaction:
        return _build(
            NFTokenMint,
            account=self.account,
            nftoken_taxon=self.taxon,
            # Zero is the ledger default and needs no tfTransferable flag
            transfer_fee=self.transfer_fee or None,
            flags=self.flags,
            uri=encode_uri(self.uri),
        )


@dataclass(frozen=True)
class CreateOfferIntent:
    """
    A sell or buy offer for one token.

    Attributes:
        account: Account creating the offer
        token_id: NFTokenID the offer is for
        amount: Price in drops, already normalized
        sell: True for a sell offer, False for a buy offer
        destination: Only this account may accept (sell offers)
        owner: Current token holder (required for buy offers)
        expiration: Ripple-epoch deadline; None means no deadline
    """
    account: str
    token_id: str
    amount: str
    sell: bool
    destination: Optional[str] = None
    owner: Optional[str] = None
    expiration: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.amount.isdigit():
            raise RequestValidationError(f"Amount must be in drops, got: {self.amount!r}")
        if not self.sell and not self.owner:
            raise RequestValidationError("Buy offers must name the token's current owner")
        if self.sell and self.owner:
            raise RequestValidationError("Sell offers must not set an owner")
        if not self.sell and self.destination:
            raise RequestValidationError("Buy offers cannot be restricted to a destination")

    @property
    def flags(self) -> int:
        return SELL_FLAG if self.sell else BUY_FLAG

    def to_transaction(self) -> Transaction:
        return _build(
            NFTokenCreateOffer,
            account=self.account,
            nftoken_id=self.token_id,
            amount=self.amount,
            flags=self.flags,
            destination=self.destination,
            owner=self.owner,
            expiration=self.expiration,
        )


@dataclass(frozen=True)
class AcceptOfferIntent:
    """Accept one offer, or match a buy and a sell offer as a broker."""
    account: str
    buy_offer: Optional[str] = None
    sell_offer: Optional[str] = None
    broker_fee: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.buy_offer and not self.sell_offer:
            raise RequestValidationError("An accept must reference at least one offer")
        if self.broker_fee is not None and not self.brokered:
            raise RequestValidationError("A broker fee requires both a buy and a sell offer")

    @property
    def brokered(self) -> bool:
        return bool(self.buy_offer and self.sell_offer)

    def to_transaction(self) -> Transaction:
        return _build(
            NFTokenAcceptOffer,
            account=self.account,
            nftoken_buy_offer=self.buy_offer,
            nftoken_sell_offer=self.sell_offer,
            nftoken_broker_fee=self.broker_fee,
        )


@dataclass(frozen=True)
class BurnIntent:
    account: str
    token_id: str
    owner: Optional[str] = None

    def __post_init__(self) -> None:
        # Burning your own token never names an owner
        if self.owner is not None and self.owner == self.account:
            raise RequestValidationError(
                "Owner must differ from the burning account; omit owner to burn your own token"
            )

    def to_transaction(self) -> Transaction:
        return _build(
            NFTokenBurn,
            account=self.account,
            nftoken_id=self.token_id,
            owner=self.owner,
        )


@dataclass(frozen=True)
class CancelOffersIntent:
    account: str
    offer_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.offer_ids:
            raise RequestValidationError("At least one offer ID is required")

    def to_transaction(self) -> Transaction:
        return _build(
            NFTokenCancelOffer,
            account=self.account,
            nftoken_offers=list(self.offer_ids),
        )


@dataclass(frozen=True)
class ListingOptions:
    """
    Parameters of one account_nfts page request.

    Attributes:
        account: Account whose tokens are listed
        limit: Page size, inclusive range [32, 400]
        marker: Opaque cursor from a previous page
    """
    account: str
    limit: int = DEFAULT_PAGE_SIZE
    marker: Optional[Any] = None

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise RequestValidationError(f"Limit must be an integer, got: {self.limit!r}")
        if self.limit < MIN_PAGE_SIZE or self.limit > MAX_PAGE_SIZE:
            raise RequestValidationError(
                f"Limit is out of bounds. Please use a value between "
                f"{MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}"
            )


__all__ = [
    "AcceptOfferIntent",
    "BurnIntent",
    "CancelOffersIntent",
    "CreateOfferIntent",
    "ListingOptions",
    "MintIntent",
    "DEFAULT_MINT_FLAGS",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MIN_PAGE_SIZE",
]
