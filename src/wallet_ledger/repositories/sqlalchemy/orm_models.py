"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator

from wallet_ledger.core.timezone import now_utc
from wallet_ledger.domain.models import (
    AMOUNT_DECIMALS,
    MAX_CURRENCY_LENGTH,
    MAX_WALLET_ADDRESS_LENGTH,
    TransactionType,
)
from wallet_ledger.repositories.sqlalchemy.database import Base


def to_base_units(amount) -> int:
    """Convert a Decimal amount to an integer count of 10^-8 units."""
    scaled = Decimal(amount).scaleb(AMOUNT_DECIMALS)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Amount {amount} has more than {AMOUNT_DECIMALS} decimal places")
    return int(scaled)


def from_base_units(units: int) -> Decimal:
    """Convert an integer count of 10^-8 units back to a Decimal amount."""
    return Decimal(units).scaleb(-AMOUNT_DECIMALS)


class BaseUnits(TypeDecorator):
    """
    Decimal amount stored as an exact BIGINT of 10^-8 units.

    SQLite has no exact decimal storage, so NUMERIC columns there compare as
    floats. Integers compare and add exactly on every backend.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return to_base_units(value) if value is not None else None

    def process_result_value(self, value, dialect):
        return from_base_units(value) if value is not None else None


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    account_id = Column(String(64), primary_key=True)
    balance = Column(BaseUnits, nullable=False, default=Decimal("0"))
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    holdings = relationship("HoldingORM", back_populates="account", order_by="HoldingORM.currency")
    history = relationship("AccountHistoryORM", back_populates="account", order_by="AccountHistoryORM.seq")


class HoldingORM(Base):
    """SQLAlchemy model for one per-currency holding of an account."""

    __tablename__ = "holdings"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_holdings_non_negative"),)

    account_id = Column(String(64), ForeignKey("accounts.account_id"), primary_key=True)
    currency = Column(String(MAX_CURRENCY_LENGTH), primary_key=True)
    amount = Column(BaseUnits, nullable=False, default=Decimal("0"))

    account = relationship("AccountORM", back_populates="holdings")


class TransactionRecordORM(Base):
    """SQLAlchemy model for TransactionRecord."""

    __tablename__ = "wallet_transactions"

    txn_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), ForeignKey("accounts.account_id"), nullable=False, index=True)
    txn_type = Column(SqlEnum(TransactionType), nullable=False)
    amount = Column(BaseUnits, nullable=False)
    cryptocurrency = Column(String(MAX_CURRENCY_LENGTH), nullable=False)
    wallet_address = Column(String(MAX_WALLET_ADDRESS_LENGTH), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)


class AccountHistoryORM(Base):
    """SQLAlchemy model for the account's ordered transaction history pointers."""

    __tablename__ = "account_history"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(String(64), ForeignKey("accounts.account_id"), nullable=False, index=True)
    txn_id = Column(String(36), ForeignKey("wallet_transactions.txn_id"), nullable=False, unique=True)

    account = relationship("AccountORM", back_populates="history")
