"""Domain layer - pure business models with no external dependencies."""

from wallet_ledger.domain.models import (
    Account,
    BalanceSnapshot,
    TransactionRecord,
    TransactionType,
)

__all__ = [
    "Account",
    "BalanceSnapshot",
    "TransactionRecord",
    "TransactionType",
]
