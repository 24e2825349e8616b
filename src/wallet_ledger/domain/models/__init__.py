"""Domain models package."""

from wallet_ledger.domain.models.enums import TransactionType
from wallet_ledger.domain.models.account import Account, BalanceSnapshot
from wallet_ledger.domain.models.transaction import (
    AMOUNT_DECIMALS,
    AMOUNT_QUANTUM,
    MAX_CURRENCY_LENGTH,
    MAX_WALLET_ADDRESS_LENGTH,
    TransactionRecord,
)

__all__ = [
    "TransactionType",
    "Account",
    "BalanceSnapshot",
    "TransactionRecord",
    "AMOUNT_DECIMALS",
    "AMOUNT_QUANTUM",
    "MAX_CURRENCY_LENGTH",
    "MAX_WALLET_ADDRESS_LENGTH",
]
