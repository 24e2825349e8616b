"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from wallet_ledger.domain.models import (
    MAX_CURRENCY_LENGTH,
    MAX_WALLET_ADDRESS_LENGTH,
    TransactionType,
)


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a transaction.

    ``type`` and the sign of ``amount`` are checked by the ledger so that they
    are reported as INVALID_INPUT rather than schema errors.
    """

    type: str = Field(..., description="Transaction type: sent or received")
    amount: Decimal = Field(..., description="Positive amount of cryptocurrency")
    cryptocurrency: str = Field(..., min_length=1, max_length=MAX_CURRENCY_LENGTH, description="Currency symbol")
    wallet_address: str = Field(..., max_length=MAX_WALLET_ADDRESS_LENGTH, description="Counterparty wallet address")


class TransactionResponse(BaseModel):
    """Response schema for a single transaction record."""

    model_config = {"from_attributes": True}

    txn_id: str
    user_id: str
    txn_type: TransactionType
    amount: Decimal
    cryptocurrency: str
    wallet_address: str
    timestamp: datetime


class RecordTransactionResponse(BaseModel):
    """Response schema for a recorded transaction with the resulting balances."""

    success: bool = True
    message: str = "Transaction recorded successfully"
    transaction: TransactionResponse
    balance: Decimal
    holdings: dict[str, Decimal]


class TransactionDetailResponse(BaseModel):
    """Response schema for fetching one transaction."""

    success: bool = True
    transaction: TransactionResponse


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    success: bool = True
    transactions: list[TransactionResponse]
    count: int
