"""Repository layer - data access abstractions and implementations."""

from wallet_ledger.repositories.protocols import (
    AccountRepository,
    TransactionRepository,
)

__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
