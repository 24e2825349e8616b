"""SQLAlchemy implementation of AccountRepository."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, literal, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wallet_ledger.core.exceptions import ValidationError
from wallet_ledger.core.timezone import now_utc, to_utc
from wallet_ledger.domain.models import Account, BalanceSnapshot
from wallet_ledger.repositories.sqlalchemy.database import store_errors
from wallet_ledger.repositories.sqlalchemy.orm_models import (
    AccountORM,
    AccountHistoryORM,
    HoldingORM,
    to_base_units,
)

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account with its initial holdings."""
        with store_errors(self._db):
            orm_account = AccountORM(
                account_id=account.account_id,
                balance=account.balance,
                created_at=account.created_at or now_utc(),
            )
            self._db.add(orm_account)
            for currency, amount in account.holdings.items():
                self._db.add(HoldingORM(
                    account_id=account.account_id,
                    currency=currency,
                    amount=amount,
                ))
            try:
                self._db.commit()
            except IntegrityError as exc:
                self._db.rollback()
                raise ValidationError(f"Account already exists: {account.account_id}") from exc
            self._db.refresh(orm_account)
            return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account with holdings and history by ID."""
        with store_errors(self._db):
            orm_account = self._db.query(AccountORM).filter(
                AccountORM.account_id == account_id
            ).first()
            return self._to_domain(orm_account) if orm_account else None

    def apply_delta(
        self,
        account_id: str,
        currency: str,
        delta: Decimal,
    ) -> Optional[BalanceSnapshot]:
        """
        Atomically add ``delta`` to the balance and the currency holding.

        Runs as a single store transaction. The account row is written first so
        it holds the account's write lock for the rest of the transaction; the
        holding update for a debit then carries the ``amount >= magnitude``
        guard. Any zero-row match rolls everything back and returns None.
        The snapshot is read before commit so it reflects exactly this
        mutation. Amounts are compared and added as integer base units.
        """
        with store_errors(self._db):
            units = literal(to_base_units(delta), BigInteger)
            touched = self._db.execute(
                update(AccountORM)
                .where(AccountORM.account_id == account_id)
                .values(balance=AccountORM.balance + units)
                .execution_options(synchronize_session=False)
            )
            if touched.rowcount == 0:
                self._db.rollback()
                return None

            if delta < 0:
                debited = self._db.execute(
                    update(HoldingORM)
                    .where(
                        HoldingORM.account_id == account_id,
                        HoldingORM.currency == currency,
                        HoldingORM.amount >= -units,
                    )
                    .values(amount=HoldingORM.amount + units)
                    .execution_options(synchronize_session=False)
                )
                if debited.rowcount == 0:
                    self._db.rollback()
                    logger.debug("Debit guard rejected %s %s on %s", -delta, currency, account_id)
                    return None
            else:
                credited = self._db.execute(
                    update(HoldingORM)
                    .where(
                        HoldingORM.account_id == account_id,
                        HoldingORM.currency == currency,
                    )
                    .values(amount=HoldingORM.amount + units)
                    .execution_options(synchronize_session=False)
                )
                if credited.rowcount == 0:
                    self._db.add(HoldingORM(
                        account_id=account_id,
                        currency=currency,
                        amount=delta,
                    ))
                    self._db.flush()

            snapshot = self._read_snapshot(account_id)
            self._db.commit()
            return snapshot

    def append_history(self, account_id: str, txn_id: str) -> None:
        """Append a record id to the account's transaction history."""
        with store_errors(self._db):
            self._db.add(AccountHistoryORM(account_id=account_id, txn_id=txn_id))
            self._db.commit()

    def _read_snapshot(self, account_id: str) -> BalanceSnapshot:
        balance = self._db.execute(
            select(AccountORM.balance).where(AccountORM.account_id == account_id)
        ).scalar_one()
        rows = self._db.execute(
            select(HoldingORM.currency, HoldingORM.amount)
            .where(HoldingORM.account_id == account_id)
            .order_by(HoldingORM.currency)
        ).all()
        return BalanceSnapshot(
            balance=_to_decimal(balance),
            holdings={currency: _to_decimal(amount) for currency, amount in rows},
        )

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            balance=_to_decimal(orm.balance),
            holdings={h.currency: _to_decimal(h.amount) for h in orm.holdings},
            transaction_history=[entry.txn_id for entry in orm.history],
            created_at=to_utc(orm.created_at),
        )


def _to_decimal(value: Optional[Decimal]) -> Decimal:
    return value if value is not None else Decimal("0")
