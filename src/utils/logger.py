import os
import sys

from loguru import logger


def setup_logger(*, json_logs: bool = False, level: str | None = None) -> None:
    """Configure loguru for the wallet lookup CLI.

    An explicit level wins; otherwise LOG_LEVEL env, then INFO.
    Logs go to stderr so the printed report on stdout stays clean.
    """
    console_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, serialize=True, level=console_level)
        return

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
        level=console_level,
        colorize=True,
    )
