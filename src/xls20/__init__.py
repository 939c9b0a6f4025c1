__all__ = [
    # Client
    "LedgerOfferClient",
    "SHORT_PAGE_THRESHOLD",
    # Errors
    "XLS20Error",
    "NotConnectedError",
    "NetworkConfigError",
    "RequestValidationError",
    "LedgerResponseError",
    # Networks
    "Endpoint",
    "resolve_endpoint",
    # Intents
    "AcceptOfferIntent",
    "BurnIntent",
    "CancelOffersIntent",
    "CreateOfferIntent",
    "ListingOptions",
    "MintIntent",
    "DEFAULT_MINT_FLAGS",
    # Identity
    "generate_seed",
    "get_address",
    "get_wallet",
    "load_config",
    "load_seed",
    "save_seed",
    # Outcomes
    "balance_changes",
    "is_success",
    "minted_token_id",
    "transaction_result",
]

from .identity.wallet import generate_seed, get_address, get_wallet, load_config, load_seed, save_seed
from .ledger.client import SHORT_PAGE_THRESHOLD, LedgerOfferClient
from .ledger.errors import (
    LedgerResponseError,
    NetworkConfigError,
    NotConnectedError,
    RequestValidationError,
    XLS20Error,
)
from .ledger.intents import (
    DEFAULT_MINT_FLAGS,
    AcceptOfferIntent,
    BurnIntent,
    CancelOffersIntent,
    CreateOfferIntent,
    ListingOptions,
    MintIntent,
)
from .ledger.networks import Endpoint, resolve_endpoint
from .utils import balance_changes, is_success, minted_token_id, transaction_result
