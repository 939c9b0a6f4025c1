"""Shared fixtures: an in-memory ledger client and a submission recorder."""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest
from xrpl.models.requests.request import RequestMethod
from xrpl.models.response import Response, ResponseStatus

from xls20.ledger.client import LedgerOfferClient

TOKEN_ID = "000800006203F49C21D5D6E022CB16DE3538F248662FC73C29ABA6A90000000D"
OFFER_A = "9C92E061381C1EF37A8CDE0E8FC35188BFC30B1883825042A64309AC09F4C36D"
OFFER_B = "F5BC0A6FD7DFA22A92CD44DE7F548760D855C35755857D1AAFD41CA3CA57CA3A"
TX_HASH = "C53ECF838647FA5A4C780377025FEC7999AB4182590510CA461444B207AB74A9"


class FakeLedgerClient:
    """Stands in for xrpl's WebsocketClient; records every request."""

    def __init__(self, pages: Optional[list[dict[str, Any]]] = None) -> None:
        self._open = False
        self.requests: list[Any] = []
        self.pages = list(pages or [])

    def open(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def is_open(self) -> bool:
        return self._open

    def request(self, request: Any) -> Response:
        self.requests.append(request)
        if request.method == RequestMethod.ACCOUNT_NFTS:
            if self.pages:
                page = self.pages.pop(0)
                if "error" in page:
                    return Response(status=ResponseStatus.ERROR, result=page)
                return Response(status=ResponseStatus.SUCCESS, result=page)
            return Response(
                status=ResponseStatus.SUCCESS,
                result={"account": request.account, "account_nfts": []},
            )
        return Response(
            status=ResponseStatus.SUCCESS,
            result={
                "account_data": {"Account": request.account, "Balance": "1000000000"},
                "validated": True,
            },
        )


class SubmissionRecorder:
    """Replaces submit_and_wait; keeps the transactions it was handed."""

    def __init__(self) -> None:
        self.transactions: list[Any] = []
        self.wallets: list[Any] = []
        self.result_code = "tesSUCCESS"
        self.extra_meta: dict[str, Any] = {}

    def __call__(self, transaction: Any, client: Any, wallet: Any) -> Response:
        self.transactions.append(transaction)
        self.wallets.append(wallet)
        meta = {
            "TransactionResult": self.result_code,
            "AffectedNodes": [],
            **self.extra_meta,
        }
        return Response(
            status=ResponseStatus.SUCCESS,
            result={
                **transaction.to_xrpl(),
                "hash": TX_HASH,
                "meta": meta,
                "validated": True,
            },
        )

    @property
    def last(self) -> Any:
        return self.transactions[-1]


def make_nfts(count: int, start: int = 0) -> list[dict[str, Any]]:
    return [
        {"NFTokenID": f"{i:064X}", "NFTokenTaxon": 0, "Flags": 9, "nft_serial": i}
        for i in range(start, start + count)
    ]


@pytest.fixture()
def fake_ledger() -> FakeLedgerClient:
    return FakeLedgerClient()


@pytest.fixture()
def submitted(monkeypatch: pytest.MonkeyPatch) -> SubmissionRecorder:
    recorder = SubmissionRecorder()
    monkeypatch.setattr("xls20.ledger.client.submit_and_wait", recorder)
    return recorder


@pytest.fixture()
def client(fake_ledger: FakeLedgerClient) -> LedgerOfferClient:
    """A connected client on Devnet backed by the fake ledger."""
    c = LedgerOfferClient("Devnet", client=fake_ledger)
    c.connect()
    return c


@pytest.fixture()
def ledger_factory() -> Callable[..., LedgerOfferClient]:
    """Build LedgerOfferClient instances that share one fake ledger."""
    ledger = FakeLedgerClient()

    def factory(network: str, seed: Optional[str] = None, faucet_host: Optional[str] = None) -> LedgerOfferClient:
        return LedgerOfferClient(network, seed, faucet_host=faucet_host, client=ledger)

    factory.ledger = ledger  # type: ignore[attr-defined]
    return factory
