"""SQLAlchemy repository implementations."""

from wallet_ledger.repositories.sqlalchemy.database import (
    build_engine,
    get_engine,
    get_session_factory,
    get_db,
    store_errors,
    init_db,
    reset_database,
    Base,
)
from wallet_ledger.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from wallet_ledger.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository

__all__ = [
    "build_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "store_errors",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTransactionRepository",
]
