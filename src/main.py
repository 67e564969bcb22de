"""Entry point: look up a Solana wallet and print its balance, tokens and transactions.

Usage:
    python -m src.main <address> [--rpc-url URL] [--log-level DEBUG] [--json-logs]
"""

import argparse
import asyncio
import sys

from config.settings import settings
from src.rpc.client import SolanaRpcClient
from src.ui.formatters import format_wallet_report
from src.utils.logger import setup_logger
from src.wallet.screen import WalletScreenState, search


async def run(address: str, rpc_url: str) -> int:
    state = WalletScreenState(address=address)
    async with SolanaRpcClient(rpc_url) as client:
        await search(state, client)

    print(format_wallet_report(state))
    return 1 if state.error else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solana wallet lookup")
    parser.add_argument("address", help="Wallet address (base58)")
    parser.add_argument("--rpc-url", default=settings.solana_rpc_url)
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--json-logs", action="store_true", default=settings.json_logs)
    args = parser.parse_args(argv)

    setup_logger(json_logs=args.json_logs, level=args.log_level)
    return asyncio.run(run(args.address, args.rpc_url))


if __name__ == "__main__":
    sys.exit(main())
