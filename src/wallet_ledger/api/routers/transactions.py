"""Transaction endpoints."""

from fastapi import APIRouter, Depends

from wallet_ledger.api.deps import get_balance_ledger, get_current_user_id
from wallet_ledger.api.schemas import (
    TransactionCreateRequest,
    TransactionResponse,
    RecordTransactionResponse,
    TransactionDetailResponse,
    TransactionListResponse,
)
from wallet_ledger.services import BalanceLedger

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=RecordTransactionResponse, status_code=201)
def record_transaction(
    data: TransactionCreateRequest,
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """Record a sent/received transaction and return the updated balances."""
    result = ledger.record_transaction(
        user_id=user_id,
        txn_type=data.type,
        amount=data.amount,
        cryptocurrency=data.cryptocurrency,
        wallet_address=data.wallet_address,
    )
    return RecordTransactionResponse(
        transaction=TransactionResponse.model_validate(result.record),
        balance=result.balance,
        holdings=result.holdings,
    )


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """List the caller's transactions, most recent first."""
    records = ledger.list_transactions(user_id)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(r) for r in records],
        count=len(records),
    )


@router.get("/{txn_id}", response_model=TransactionDetailResponse)
def get_transaction(
    txn_id: str,
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """Get one of the caller's transactions."""
    record = ledger.get_transaction(user_id, txn_id)
    return TransactionDetailResponse(transaction=TransactionResponse.model_validate(record))
