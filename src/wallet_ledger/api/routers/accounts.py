"""Account endpoints."""

from fastapi import APIRouter, Depends

from wallet_ledger.api.deps import get_balance_ledger, get_current_user_id
from wallet_ledger.api.schemas import (
    AccountResponse,
    AccountCreatedResponse,
    AccountWithHistoryResponse,
    ReconcileResponse,
    TransactionResponse,
)
from wallet_ledger.services import BalanceLedger

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountCreatedResponse, status_code=201)
def open_account(
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """Open an empty wallet account for the caller."""
    account = ledger.open_account(user_id)
    return AccountCreatedResponse(account=AccountResponse.model_validate(account))


@router.get("/me", response_model=AccountWithHistoryResponse)
def get_my_account(
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """Get the caller's account with its transaction history populated."""
    result = ledger.get_account_with_history(user_id)
    return AccountWithHistoryResponse(
        account=AccountResponse.model_validate(result.account),
        transactions=[TransactionResponse.model_validate(r) for r in result.transactions],
    )


@router.post("/me/reconcile", response_model=ReconcileResponse)
def reconcile_history(
    user_id: str = Depends(get_current_user_id),
    ledger: BalanceLedger = Depends(get_balance_ledger),
):
    """Re-link records missing from the caller's history list."""
    return ReconcileResponse(appended=ledger.reconcile_history(user_id))
