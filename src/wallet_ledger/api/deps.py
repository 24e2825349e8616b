"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from wallet_ledger.repositories.sqlalchemy.database import get_db
from wallet_ledger.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
)
from wallet_ledger.services import BalanceLedger


def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Identity of the caller, set by the authentication layer in front of this app."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_balance_ledger(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> BalanceLedger:
    """Provide BalanceLedger instance."""
    return BalanceLedger(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
    )
