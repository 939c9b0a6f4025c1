"""
LedgerOfferClient - XLS-20 NFT operations over one ledger connection.

Owns one wallet and one websocket client.  Every request-issuing method
requires an open connection and fails with NotConnectedError before any
I/O otherwise.  Transactions are signed by the client's wallet, submitted,
and awaited until validated; the validated response is returned as-is,
including non-success result codes.

The client is a single-owner resource: connect/disconnect are not guarded
against concurrent use.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Optional, Union

from xrpl.clients import WebsocketClient
from xrpl.models.requests import AccountInfo, AccountNFTs
from xrpl.models.response import Response
from xrpl.transaction import submit_and_wait
from xrpl.wallet import Wallet, generate_faucet_wallet

from ..utils import as_offer_list, normalize_amount, to_ripple_time
from .errors import (
    LedgerResponseError,
    NetworkConfigError,
    NotConnectedError,
    RequestValidationError,
)
from .intents import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    AcceptOfferIntent,
    BurnIntent,
    CancelOffersIntent,
    CreateOfferIntent,
    ListingOptions,
    MintIntent,
)
from .networks import DEFAULT_NETWORK, Endpoint, resolve_endpoint

logger = logging.getLogger(__name__)

# A full listing page holds up to MAX_PAGE_SIZE tokens.  A page with fewer
# than this many tokens is taken as the last one, even if a marker came back.
SHORT_PAGE_THRESHOLD = 200

Expiration = Union[int, datetime]


class LedgerOfferClient:
    """
    Façade over one XRP Ledger connection and one signing wallet.

    Args:
        network: "Devnet", "Testnet", "Mainnet" or a websocket URL
        seed: Wallet seed; a fresh wallet is generated when omitted
        faucet_host: Faucet host, enables funding on a custom endpoint
        client: Pre-built client with the WebsocketClient surface
            (open, close, is_open, request)
    """

    def __init__(
        self,
        network: str = DEFAULT_NETWORK,
        seed: Optional[str] = None,
        *,
        faucet_host: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self._wallet = Wallet.from_seed(seed) if seed else Wallet.create()
        self._endpoint = resolve_endpoint(network, faucet_host=faucet_host)
        self._client = client if client is not None else WebsocketClient(self._endpoint.url)

    # ---- connection ----

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def wallet(self) -> Wallet:
        return self._wallet

    @property
    def address(self) -> str:
        return self._wallet.classic_address

    @property
    def is_connected(self) -> bool:
        return bool(self._client.is_open())

    def connect(self) -> None:
        if self.is_connected:
            return
        logger.info("ledger.connect network=%s url=%s", self._endpoint.name, self._endpoint.url)
        self._client.open()

    def disconnect(self) -> None:
        if not self.is_connected:
            return
        logger.info("ledger.disconnect network=%s", self._endpoint.name)
        self._client.close()

    def __enter__(self) -> "LedgerOfferClient":
        self.connect()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.disconnect()

    def _require_connection(self) -> None:
        if not self.is_connected:
            raise NotConnectedError(
                "Client is not connected to the network. "
                "Call connect() before making requests."
            )

    def _request(self, request: Any) -> Response:
        logger.info("ledger.request method=%s", request.method.value)
        return self._client.request(request)

    def _submit(self, intent: Any) -> Response:
        tx = intent.to_transaction()
        logger.info(
            "ledger.submit type=%s account=%s",
            tx.transaction_type.value,
            tx.account,
        )
        response = submit_and_wait(tx, self._client, self._wallet)
        meta = response.result.get("meta") or {}
        logger.info(
            "ledger.submit.done type=%s result=%s hash=%s",
            tx.transaction_type.value,
            meta.get("TransactionResult") if isinstance(meta, dict) else None,
            response.result.get("hash"),
        )
        return response

    # ---- queries ----

    def get_account_info(self) -> Response:
        """Query validated account state for the client's own account."""
        self._require_connection()
        return self._request(
            AccountInfo(account=self.address, ledger_index="validated")
        )

    def fund_wallet(self) -> Wallet:
        """
        Fund the client's wallet from the test network faucet.

        Raises:
            NetworkConfigError: If the endpoint is not a test network
        """
        self._require_connection()
        if not self._endpoint.is_test:
            raise NetworkConfigError(
                f"Funding only works on test networks, not {self._endpoint.name}"
            )
        logger.info("ledger.fund network=%s account=%s", self._endpoint.name, self.address)
        return generate_faucet_wallet(
            self._client,
            wallet=self._wallet,
            faucet_host=self._endpoint.faucet_host,
        )

    def get_account_nfts(
        self,
        address: Optional[str] = None,
        limit: Optional[int] = None,
        marker: Optional[Any] = None,
    ) -> Response:
        """
        Get one page of NFTs owned by an account.

        Args:
            address: Account to list (default: own account)
            limit: Page size in [32, 400] (default: 100)
            marker: Cursor from a previous page; markers expire after a few minutes

        Returns:
            The raw account_nfts response; result["marker"] is set when
            more pages may exist
        """
        self._require_connection()
        options = ListingOptions(
            account=address or self.address,
            limit=DEFAULT_PAGE_SIZE if limit is None else limit,
            marker=marker,
        )
        request = AccountNFTs(
            account=options.account,
            limit=options.limit,
            marker=options.marker,
        )
        return self._request(request)

    def get_all_account_nfts(self, address: Optional[str] = None) -> list[dict[str, Any]]:
        """
        Get every NFT owned by an account, following markers page by page.

        Stops on an empty page, a page shorter than SHORT_PAGE_THRESHOLD,
        or a page without a marker.

        Raises:
            LedgerResponseError: If the node answers a page with an error
        """
        nfts: list[dict[str, Any]] = []
        marker = None
        page_no = 0
        while True:
            response = self.get_account_nfts(address, MAX_PAGE_SIZE, marker)
            page_no += 1
            if not response.is_successful():
                raise LedgerResponseError(
                    f"account_nfts failed: {response.result.get('error', response.result)}"
                )

            page = response.result.get("account_nfts") or []
            logger.debug("ledger.list_nfts page=%d size=%d", page_no, len(page))
            if not page:
                break
            nfts.extend(page)
            if len(page) < SHORT_PAGE_THRESHOLD:
                break
            marker = response.result.get("marker")
            if marker is None:
                break

        return nfts

    # ---- transactions ----

    def mint(
        self,
        transfer_fee: int,
        flags: int,
        uri: str,
        account: Optional[str] = None,
    ) -> Response:
        """
        Mint an NFT.

        Args:
            transfer_fee: Royalty in tenths of a basis point (5000 == 5%)
            flags: NFTokenMint flags (burnable + transferable is 9)
            uri: Metadata URI, hex-encoded on the ledger
            account: Minting account (default: own account)
        """
        self._require_connection()
        intent = MintIntent(
            account=account or self.address,
            uri=uri,
            flags=flags,
            transfer_fee=transfer_fee,
        )
        return self._submit(intent)

    def create_sell_offer(
        self,
        token_id: str,
        price: Union[int, str],
        account: Optional[str] = None,
        expiration: Optional[Expiration] = None,
    ) -> Response:
        """Offer a token for sale to anyone at `price` drops."""
        self._require_connection()
        return self._submit(
            self._offer_intent(token_id, price, sell=True, account=account, expiration=expiration)
        )

    def create_whitelist_sell_offer(
        self,
        token_id: str,
        price: Union[int, str],
        destination: str,
        account: Optional[str] = None,
        expiration: Optional[Expiration] = None,
    ) -> Response:
        """Offer a token for sale that only `destination` may accept."""
        self._require_connection()
        return self._submit(
            self._offer_intent(
                token_id,
                price,
                sell=True,
                account=account,
                expiration=expiration,
                destination=destination,
            )
        )

    def create_buy_offer(
        self,
        token_id: str,
        price: Union[int, str],
        account: Optional[str] = None,
        expiration: Optional[Expiration] = None,
        owner: Optional[str] = None,
    ) -> Response:
        """
        Offer to buy a token for `price` drops.

        `owner` is the token's current holder; the ledger requires it on
        buy offers.
        """
        self._require_connection()
        return self._submit(
            self._offer_intent(
                token_id,
                price,
                sell=False,
                account=account,
                expiration=expiration,
                owner=owner,
            )
        )

    def accept_buy_offer(self, offer_id: str, account: Optional[str] = None) -> Response:
        """Accept a buy offer, selling the token."""
        self._require_connection()
        return self._submit(
            AcceptOfferIntent(account=account or self.address, buy_offer=offer_id)
        )

    def accept_sell_offer(self, offer_id: str, account: Optional[str] = None) -> Response:
        """Accept a sell offer, buying the token."""
        self._require_connection()
        return self._submit(
            AcceptOfferIntent(account=account or self.address, sell_offer=offer_id)
        )

    def broker_nft_sale(
        self,
        buy_offer_id: str,
        sell_offer_id: str,
        broker_fee: Optional[Union[int, str]] = None,
        account: Optional[str] = None,
    ) -> Response:
        """
        Match a buy and a sell offer as a broker.

        The acting account must be the broker, not either counterparty.
        Without a broker fee the broker keeps nothing.
        """
        self._require_connection()
        fee = None
        if broker_fee is not None:
            fee = self._amount(broker_fee)
            # A zero fee is sent as no fee field at all
            if int(fee) == 0:
                fee = None
        return self._submit(
            AcceptOfferIntent(
                account=account or self.address,
                buy_offer=buy_offer_id,
                sell_offer=sell_offer_id,
                broker_fee=fee,
            )
        )

    def burn(
        self,
        token_id: str,
        account: Optional[str] = None,
        owner: Optional[str] = None,
    ) -> Response:
        """
        Burn a token.

        `owner` is only for burning a token held by another account that
        `account` may burn; it must not equal `account`.
        """
        self._require_connection()
        return self._submit(
            BurnIntent(account=account or self.address, token_id=token_id, owner=owner)
        )

    def cancel_offers(
        self,
        offer_ids: Union[str, Iterable[str]],
        account: Optional[str] = None,
    ) -> Response:
        """Cancel one offer ID or a list of them in a single transaction."""
        self._require_connection()
        return self._submit(
            CancelOffersIntent(account=account or self.address, offer_ids=as_offer_list(offer_ids))
        )

    # ---- helpers ----

    @staticmethod
    def _amount(value: Union[int, str]) -> str:
        try:
            return normalize_amount(value)
        except ValueError as exc:
            raise RequestValidationError(str(exc)) from exc

    @staticmethod
    def _expiration(value: Optional[Expiration]) -> Optional[int]:
        if value is None:
            return None
        try:
            return to_ripple_time(value)
        except (TypeError, ValueError) as exc:
            raise RequestValidationError(f"Invalid expiration: {exc}") from exc

    def _offer_intent(
        self,
        token_id: str,
        price: Union[int, str],
        *,
        sell: bool,
        account: Optional[str],
        expiration: Optional[Expiration],
        destination: Optional[str] = None,
        owner: Optional[str] = None,
    ) -> CreateOfferIntent:
        return CreateOfferIntent(
            account=account or self.address,
            token_id=token_id,
            amount=self._amount(price),
            sell=sell,
            destination=destination,
            owner=owner,
            expiration=self._expiration(expiration),
        )
