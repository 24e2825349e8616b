"""Core utilities and shared functionality."""

from wallet_ledger.core.timezone import now_utc, to_utc, UTC
from wallet_ledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AccountNotFoundError,
    InsufficientFundsError,
    ForbiddenError,
    StoreUnavailableError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AccountNotFoundError",
    "InsufficientFundsError",
    "ForbiddenError",
    "StoreUnavailableError",
]
