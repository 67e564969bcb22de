"""Format wallet screen state into plain-text terminal output."""

import math
import time
from decimal import Decimal

from src.wallet.screen import WalletScreenState

PRIMARY_ADDRESS_CHARS = 6


def shorten_address(s: str, n: int = 4) -> str:
    """First and last n chars joined by '...'. No length guard: short input overlaps."""
    return f"{s[:n]}...{s[-n:]}"


def time_ago(timestamp: float, now: float | None = None) -> str:
    """Relative age of a unix timestamp (seconds), e.g. '2m ago'."""
    if now is None:
        now = time.time()
    seconds = math.floor(now - timestamp)
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def format_balance(balance: Decimal) -> str:
    return f"{balance:.4f}"


def format_wallet_report(state: WalletScreenState, now: float | None = None) -> str:
    """Render the wallet screen: balance card, token rows, transaction rows."""
    if state.error:
        return f"Error: {state.error}"
    if state.loading:
        return "Loading..."
    if not state.has_result:
        return "Enter a wallet address"

    lines = [
        "SOL Balance",
        f"{format_balance(state.balance)} SOL",
        shorten_address(state.address.strip(), PRIMARY_ADDRESS_CHARS),
        "",
    ]

    if state.tokens:
        lines.append(f"Tokens ({len(state.tokens)}):")
        for token in state.tokens:
            lines.append(
                f"  {shorten_address(token.mint, PRIMARY_ADDRESS_CHARS)}  {token.amount}"
            )
    else:
        lines.append("No tokens")

    lines.append("")
    if state.transactions:
        lines.append(f"Recent transactions ({len(state.transactions)}):")
        for tx in state.transactions:
            status = "✓" if tx.succeeded else "✗"
            age = time_ago(tx.timestamp, now) if tx.timestamp is not None else "?"
            lines.append(f"  {status} {shorten_address(tx.signature)}  {age}")
    else:
        lines.append("No transactions")

    return "\n".join(lines)
