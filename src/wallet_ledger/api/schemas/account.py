"""Pydantic schemas for account endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from wallet_ledger.api.schemas.transaction import TransactionResponse


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_id: str
    balance: Decimal
    holdings: dict[str, Decimal]
    transaction_history: list[str]
    created_at: Optional[datetime] = None


class AccountCreatedResponse(BaseModel):
    success: bool = True
    account: AccountResponse


class AccountWithHistoryResponse(BaseModel):
    """Response schema for an account with its populated transaction history."""

    success: bool = True
    account: AccountResponse
    transactions: list[TransactionResponse]


class ReconcileResponse(BaseModel):
    success: bool = True
    appended: int
