from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional, Union

from xrpl.models.response import Response
from xrpl.utils import (
    XRPLTimeRangeException,
    datetime_to_ripple_time,
    get_balance_changes,
    get_nftoken_id,
    hex_to_str,
    str_to_hex,
)

# Grouping separators a caller may use in a drops amount ("1_000_000", "1,000,000")
AMOUNT_SEPARATORS = ("_", ",", " ")

SUCCESS_CODE = "tesSUCCESS"


def normalize_amount(value: Union[int, str]) -> str:
    text = str(value)
    for sep in AMOUNT_SEPARATORS:
        text = text.replace(sep, "")
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"Amount must be a whole number of drops, got: {value!r}")
    return text


def encode_uri(uri: str) -> str:
    return str_to_hex(uri).upper()


def decode_uri(value: str) -> str:
    return hex_to_str(value)


def to_ripple_time(value: Union[int, datetime]) -> int:
    """Convert an expiration to seconds since the Ripple epoch (2000-01-01 UTC).

    Integers are taken to already be Ripple time.
    """
    if isinstance(value, bool):
        raise TypeError("Expiration must be an int or a datetime")
    if isinstance(value, datetime):
        try:
            return datetime_to_ripple_time(value)
        except XRPLTimeRangeException as exc:
            raise ValueError(str(exc)) from exc
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Expiration must not be negative, got: {value}")
        return value
    raise TypeError("Expiration must be an int or a datetime")


def as_offer_list(offer_ids: Union[str, Iterable[str]]) -> tuple[str, ...]:
    if isinstance(offer_ids, str):
        return (offer_ids,)
    return tuple(offer_ids)


# ---------------------------------------------------------------------------
# Outcome inspection
# ---------------------------------------------------------------------------

def transaction_result(response: Response) -> Optional[str]:
    """Return the engine result code of a validated transaction, if any."""
    meta = response.result.get("meta")
    if isinstance(meta, dict):
        return meta.get("TransactionResult")
    return None


def is_success(response: Response) -> bool:
    return transaction_result(response) == SUCCESS_CODE


def transaction_hash(response: Response) -> Optional[str]:
    return response.result.get("hash")


def balance_changes(response: Response) -> list[dict[str, Any]]:
    meta = response.result.get("meta")
    if not isinstance(meta, dict):
        return []
    return get_balance_changes(meta)


def minted_token_id(response: Response) -> Optional[str]:
    meta = response.result.get("meta")
    if not isinstance(meta, dict) or not is_success(response):
        return None
    # Nodes that report nftoken_id in the metadata save the page diff
    if meta.get("nftoken_id"):
        return meta["nftoken_id"]
    if not meta.get("AffectedNodes"):
        return None
    return get_nftoken_id(meta)
