"""Canned Solana JSON-RPC payloads and mocked httpx responses for tests."""

from typing import Any
from unittest.mock import MagicMock

import httpx

RPC_URL = "https://api.mainnet-beta.solana.com"
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
BONK_MINT = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"


def rpc_response(body: Any = None, status_code: int = 200, *, not_json: bool = False) -> MagicMock:
    """Build a mocked httpx.Response carrying a JSON body."""
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    if not_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = body
    return resp


def ok(result: Any) -> MagicMock:
    return rpc_response({"jsonrpc": "2.0", "id": 1, "result": result})


def rpc_error(message: str, code: int = -32602) -> MagicMock:
    return rpc_response(
        {"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}}
    )


def token_account(mint: str, ui_amount: float | None, ui_amount_string: str | None = None) -> dict:
    """One getTokenAccountsByOwner entry in jsonParsed encoding."""
    if ui_amount_string is None and ui_amount is not None:
        ui_amount_string = str(ui_amount)
    return {
        "pubkey": f"acct-{mint[:8]}",
        "account": {
            "lamports": 2039280,
            "owner": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
            "data": {
                "program": "spl-token",
                "space": 165,
                "parsed": {
                    "type": "account",
                    "info": {
                        "mint": mint,
                        "owner": WALLET,
                        "state": "initialized",
                        "tokenAmount": {
                            "amount": "0",
                            "decimals": 6,
                            "uiAmount": ui_amount,
                            "uiAmountString": ui_amount_string,
                        },
                    },
                },
            },
        },
    }


def signature(sig: str, block_time: int | None = 1_700_000_000, err: Any = None) -> dict:
    return {
        "signature": sig,
        "slot": 250_000_000,
        "blockTime": block_time,
        "err": err,
        "memo": None,
        "confirmationStatus": "finalized",
    }
