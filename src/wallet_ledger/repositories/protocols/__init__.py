"""Repository protocol definitions (interfaces)."""

from wallet_ledger.repositories.protocols.account_repo import AccountRepository
from wallet_ledger.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
