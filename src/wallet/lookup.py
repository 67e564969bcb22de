"""Wallet lookup: balance, token holdings and recent transactions in parallel.

The three queries run as independent tasks. The first failure wins:
remaining tasks are cancelled and no partial snapshot is returned.
"""

import asyncio

from loguru import logger

from src.rpc.client import SolanaRpcClient, abbreviate, validate_address
from src.rpc.models import WalletSnapshot


async def lookup_wallet(client: SolanaRpcClient, address: str) -> WalletSnapshot:
    addr = validate_address(address)
    logger.debug(f"[LOOKUP] Fetching {abbreviate(addr)}")

    tasks = [
        asyncio.create_task(client.get_balance(addr)),
        asyncio.create_task(client.get_token_holdings(addr)),
        asyncio.create_task(client.get_recent_transactions(addr)),
    ]

    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        # also runs when the caller itself is cancelled mid-lookup
        unfinished = [t for t in tasks if not t.done()]
        for task in unfinished:
            task.cancel()
        if unfinished:
            await asyncio.gather(*unfinished, return_exceptions=True)

    # Read every finished task's exception so none is reported as unretrieved
    errors = [t.exception() for t in tasks if t in done]
    for error in errors:
        if error is not None:
            raise error

    balance, tokens, transactions = (t.result() for t in tasks)
    logger.info(
        f"[LOOKUP] {abbreviate(addr)}: {balance} SOL, "
        f"{len(tokens)} tokens, {len(transactions)} txs"
    )
    return WalletSnapshot(balance=balance, tokens=tokens, transactions=transactions)
