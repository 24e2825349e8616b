"""Service layer - business logic orchestration."""

from wallet_ledger.services.balance_ledger import (
    BalanceLedger,
    RecordedTransaction,
    AccountHistory,
)

__all__ = [
    "BalanceLedger",
    "RecordedTransaction",
    "AccountHistory",
]
