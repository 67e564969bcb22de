"""Solana JSON-RPC client: SOL balance, SPL token holdings, recent signatures.

Read-only. Every query is exactly one POST to a single endpoint:
no retries, no batching, no caching between calls.

Errors:
- ValidationError: empty/whitespace address, raised before any request.
- RemoteProtocolError: node returned a JSON-RPC `error` envelope
  (message kept verbatim, shown to the user as-is).
- TransportError: connection failure, timeout, non-JSON body, HTTP error
  status without an RPC error, or a `result` of unexpected shape.
"""

from decimal import Decimal
from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from src.rpc.exceptions import RemoteProtocolError, TransportError, ValidationError
from src.rpc.models import (
    BalanceResponse,
    RpcEnvelope,
    RpcErrorBody,
    SignatureInfo,
    TokenAccountsResponse,
    TokenHolding,
    TransactionSummary,
)

SOLANA_RPC_URL = "https://api.mainnet-beta.solana.com"
# SPL Token program (legacy). Token-2022 accounts are not listed.
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
LAMPORTS_PER_SOL = 1_000_000_000
SIGNATURE_WINDOW = 10
_TIMEOUT = 10.0

_BALANCE = TypeAdapter(BalanceResponse)
_TOKEN_ACCOUNTS = TypeAdapter(TokenAccountsResponse)
_SIGNATURES = TypeAdapter(list[SignatureInfo])

T = TypeVar("T")


def validate_address(address: str | None) -> str:
    """Trim and reject empty input. Anything else is left for the node to judge."""
    addr = (address or "").strip()
    if not addr:
        raise ValidationError("Enter a wallet address")
    return addr


def abbreviate(addr: str) -> str:
    """Address shortened for log lines."""
    return f"{addr[:6]}..{addr[-4:]}" if len(addr) > 12 else addr


class SolanaRpcClient:
    """Async JSON-RPC client bound to one Solana endpoint."""

    def __init__(
        self, rpc_url: str = SOLANA_RPC_URL, http: httpx.AsyncClient | None = None
    ) -> None:
        if not rpc_url:
            raise ValueError("RPC URL is empty")
        self._rpc_url = rpc_url
        self._http = http or httpx.AsyncClient(timeout=_TIMEOUT)

    def __repr__(self) -> str:
        return f"SolanaRpcClient(rpc_url={self._rpc_url})"

    async def __aenter__(self) -> "SolanaRpcClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def call(self, method: str, params: list[Any]) -> Any:
        """Send one JSON-RPC 2.0 request and return its `result` field."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        logger.debug(f"[RPC] {method}")

        try:
            resp = await self._http.post(
                self._rpc_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.warning(f"[RPC] {method} transport failure: {type(e).__name__}: {e}")
            raise TransportError(f"{method} request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(f"[RPC] {method} returned non-JSON body (HTTP {resp.status_code})")
            raise TransportError(
                f"{method} returned a non-JSON response (HTTP {resp.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise TransportError(f"{method} returned a malformed response")

        try:
            envelope = RpcEnvelope.model_validate(data)
        except SchemaError as e:
            raw_error = data.get("error")
            if raw_error is None:
                raise TransportError(f"{method} returned a malformed response") from e
            # error present but not an object, e.g. a bare string
            envelope = RpcEnvelope(error=RpcErrorBody(message=str(raw_error)))

        if envelope.error is not None:
            logger.warning(
                f"[RPC] {method} error {envelope.error.code}: {envelope.error.message}"
            )
            raise RemoteProtocolError(envelope.error.message, code=envelope.error.code)

        if resp.status_code >= 400:
            logger.warning(f"[RPC] {method} HTTP {resp.status_code}")
            raise TransportError(f"{method} failed with HTTP {resp.status_code}")

        if "result" not in data:
            raise TransportError(f"{method} response has neither result nor error")

        return envelope.result

    async def get_balance(self, address: str) -> Decimal:
        """SOL balance of an address (lamports / 1e9, exact)."""
        addr = validate_address(address)
        result = await self.call("getBalance", [addr])
        balance = _narrow(_BALANCE, result, "getBalance")
        return Decimal(balance.value) / LAMPORTS_PER_SOL

    async def get_token_holdings(self, address: str) -> list[TokenHolding]:
        """Non-zero SPL token balances, in the order the node returned the accounts."""
        addr = validate_address(address)
        result = await self.call(
            "getTokenAccountsByOwner",
            [addr, {"programId": TOKEN_PROGRAM_ID}, {"encoding": "jsonParsed"}],
        )
        accounts = _narrow(_TOKEN_ACCOUNTS, result, "getTokenAccountsByOwner")

        holdings = [
            TokenHolding(
                mint=entry.account.data.parsed.info.mint,
                amount=entry.account.data.parsed.info.token_amount.value,
            )
            for entry in accounts.value or []
        ]
        non_zero = [h for h in holdings if h.amount > 0]
        logger.debug(
            f"[RPC] {abbreviate(addr)}: "
            f"{len(non_zero)}/{len(holdings)} token accounts non-zero"
        )
        return non_zero

    async def get_recent_transactions(self, address: str) -> list[TransactionSummary]:
        """Latest signatures for an address, newest first as ordered by the node."""
        addr = validate_address(address)
        result = await self.call(
            "getSignaturesForAddress", [addr, {"limit": SIGNATURE_WINDOW}]
        )
        signatures = _narrow(_SIGNATURES, result, "getSignaturesForAddress")

        return [
            TransactionSummary(
                signature=sig.signature,
                timestamp=sig.block_time,
                succeeded=sig.err is None,
            )
            for sig in signatures[:SIGNATURE_WINDOW]
        ]


def _narrow(adapter: TypeAdapter[T], result: Any, method: str) -> T:
    """Validate a raw `result` against the method's expected shape."""
    try:
        return adapter.validate_python(result)
    except SchemaError as e:
        logger.warning(f"[RPC] {method} result has unexpected shape: {e.error_count()} errors")
        raise TransportError(f"{method} returned an unexpected result shape") from e
