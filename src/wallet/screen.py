"""Screen state for the wallet lookup view and the search action driving it."""

from dataclasses import dataclass, field
from decimal import Decimal

from loguru import logger

from src.rpc.client import SolanaRpcClient, validate_address
from src.rpc.exceptions import ValidationError, WalletLookupError
from src.rpc.models import TokenHolding, TransactionSummary
from src.wallet.lookup import lookup_wallet


@dataclass
class WalletScreenState:
    """Everything the view renders. Owned by the view, mutated only by search()."""

    address: str = ""  # raw input text, untrimmed
    loading: bool = False
    balance: Decimal | None = None  # None until the first successful search
    tokens: list[TokenHolding] = field(default_factory=list)
    transactions: list[TransactionSummary] = field(default_factory=list)
    error: str | None = None

    @property
    def has_result(self) -> bool:
        return self.balance is not None


async def search(state: WalletScreenState, client: SolanaRpcClient) -> bool:
    """Run one lookup for state.address and apply the outcome to state.

    Returns True when fresh results were applied. While a search is in
    flight further calls are ignored. On failure previous results stay
    as they were and state.error holds the message for the user.
    """
    if state.loading:
        logger.debug("[SCREEN] Search already in flight, ignoring")
        return False

    try:
        addr = validate_address(state.address)
    except ValidationError as e:
        state.error = str(e)
        return False

    state.loading = True
    state.error = None
    try:
        snapshot = await lookup_wallet(client, addr)
    except WalletLookupError as e:
        logger.warning(f"[SCREEN] Search failed: {type(e).__name__}: {e}")
        state.error = str(e)
        return False
    finally:
        state.loading = False

    state.balance = snapshot.balance
    state.tokens = snapshot.tokens
    state.transactions = snapshot.transactions
    return True
