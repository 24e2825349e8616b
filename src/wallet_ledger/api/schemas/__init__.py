"""Pydantic schemas for API request/response."""

from wallet_ledger.api.schemas.account import (
    AccountResponse,
    AccountCreatedResponse,
    AccountWithHistoryResponse,
    ReconcileResponse,
)
from wallet_ledger.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    RecordTransactionResponse,
    TransactionDetailResponse,
    TransactionListResponse,
)

__all__ = [
    "AccountResponse",
    "AccountCreatedResponse",
    "AccountWithHistoryResponse",
    "ReconcileResponse",
    "TransactionCreateRequest",
    "TransactionResponse",
    "RecordTransactionResponse",
    "TransactionDetailResponse",
    "TransactionListResponse",
]
