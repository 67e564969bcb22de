"""Pydantic models for Solana JSON-RPC responses and the records built from them."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _RpcModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ── JSON-RPC envelope ──────────────────────────────────────────────────


class RpcErrorBody(_RpcModel):
    """Error object of a JSON-RPC response."""

    code: int | None = None
    message: str = ""
    data: Any = None


class RpcEnvelope(_RpcModel):
    """Top-level JSON-RPC 2.0 response."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: RpcErrorBody | None = None


class RpcContext(_RpcModel):
    slot: int = 0


# ── getBalance ─────────────────────────────────────────────────────────


class BalanceResponse(_RpcModel):
    context: RpcContext | None = None
    value: int = Field(ge=0)  # lamports


# ── getTokenAccountsByOwner (jsonParsed) ───────────────────────────────


class TokenAmount(_RpcModel):
    """SPL token amount as reported by the jsonParsed encoding."""

    amount: str = "0"  # raw smallest-unit integer, as string
    decimals: int = 0
    ui_amount: Decimal | None = Field(default=None, alias="uiAmount")
    # exact decimal string; NaN, inf and garbage are rejected at validation
    ui_amount_string: Decimal | None = Field(default=None, alias="uiAmountString")

    @property
    def value(self) -> Decimal:
        """Display amount. uiAmountString is exact; uiAmount is a float and may be null."""
        if self.ui_amount_string is not None:
            return self.ui_amount_string
        if self.ui_amount is not None:
            return self.ui_amount
        return Decimal("0")


class TokenAccountInfo(_RpcModel):
    mint: str
    owner: str = ""
    state: str = ""
    token_amount: TokenAmount = Field(alias="tokenAmount")


class ParsedTokenAccount(_RpcModel):
    type: str = ""  # "account"
    info: TokenAccountInfo


class TokenAccountData(_RpcModel):
    program: str = ""  # "spl-token"
    space: int = 0
    parsed: ParsedTokenAccount


class TokenAccount(_RpcModel):
    lamports: int = 0
    owner: str = ""  # token program id
    data: TokenAccountData


class TokenAccountEntry(_RpcModel):
    pubkey: str = ""  # token account address, not the mint
    account: TokenAccount


class TokenAccountsResponse(_RpcModel):
    context: RpcContext | None = None
    value: list[TokenAccountEntry] | None = None  # absent/null means no accounts


# ── getSignaturesForAddress ────────────────────────────────────────────


class SignatureInfo(_RpcModel):
    """One entry of getSignaturesForAddress."""

    signature: str
    slot: int = 0
    block_time: int | None = Field(default=None, alias="blockTime")  # unix, null if unknown
    err: Any = None  # non-None means failed
    memo: str | None = None
    confirmation_status: str | None = Field(default=None, alias="confirmationStatus")


# ── Records consumed by the screen ─────────────────────────────────────


class TokenHolding(BaseModel):
    """Non-zero SPL token balance owned by the queried wallet."""

    mint: str
    amount: Decimal


class TransactionSummary(BaseModel):
    """Recent transaction touching the queried wallet."""

    signature: str
    timestamp: int | None = None  # unix seconds
    succeeded: bool = True


@dataclass
class WalletSnapshot:
    """Result of one wallet lookup. Replaced wholesale on the next lookup."""

    balance: Decimal  # SOL
    tokens: list[TokenHolding] = field(default_factory=list)
    transactions: list[TransactionSummary] = field(default_factory=list)
