"""Logging configuration."""

import logging
import sys

from wallet_ledger.config.settings import get_settings


def setup_logging() -> None:
    """Configure application logging at the level named by ``settings.log_level``."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("wallet_ledger").setLevel(level)

    # Statement/pool chatter would drown out ledger events
    for noisy in ("sqlalchemy.engine", "sqlalchemy.pool"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
