"""API routers package."""

from wallet_ledger.api.routers.accounts import router as accounts_router
from wallet_ledger.api.routers.transactions import router as transactions_router

__all__ = [
    "accounts_router",
    "transactions_router",
]
