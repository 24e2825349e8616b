"""
Pytest configuration and fixtures for wallet ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and ledger fixtures
- Factory helpers for accounts and funded accounts
- A FastAPI test client bound to the test database
"""

import os

# Keep the app's default engine off the user's home directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from wallet_ledger.main import app
from wallet_ledger.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from wallet_ledger.repositories.sqlalchemy import orm_models  # noqa: F401
from wallet_ledger.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
)
from wallet_ledger.services import BalanceLedger
from wallet_ledger.domain.models import Account, TransactionType
from wallet_ledger.core.timezone import UTC
from wallet_ledger.config.settings import reset_settings


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()
    reset_database()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def ledger(account_repo, transaction_repo) -> BalanceLedger:
    """Provide test BalanceLedger."""
    return BalanceLedger(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(ledger) -> Callable[..., Account]:
    """Factory for opening test accounts, optionally funded via received transactions."""

    def _create_account(
        account_id: Optional[str] = None,
        holdings: Optional[dict[str, Decimal]] = None,
    ) -> Account:
        if account_id is None:
            account_id = f"user-{uuid.uuid4().hex[:8]}"
        ledger.open_account(account_id)
        for currency, amount in (holdings or {}).items():
            ledger.record_transaction(
                user_id=account_id,
                txn_type=TransactionType.RECEIVED,
                amount=amount,
                cryptocurrency=currency,
                wallet_address="funding-source",
            )
        return ledger.get_account(account_id)

    return _create_account


@pytest.fixture
def sample_account(account_factory) -> Account:
    """An empty account."""
    return account_factory(account_id="alice")


@pytest.fixture
def btc_account(account_factory) -> Account:
    """An account holding 5 BTC with balance 5."""
    return account_factory(account_id="alice", holdings={"BTC": Decimal("5")})


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def auth_headers(user_id: str) -> dict[str, str]:
    """Headers the authentication layer would attach for ``user_id``."""
    return {"X-User-Id": user_id}
