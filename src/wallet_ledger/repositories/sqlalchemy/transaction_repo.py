"""SQLAlchemy implementation of TransactionRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from wallet_ledger.core.timezone import to_utc
from wallet_ledger.domain.models import TransactionRecord
from wallet_ledger.repositories.sqlalchemy.database import store_errors
from wallet_ledger.repositories.sqlalchemy.orm_models import (
    AccountHistoryORM,
    TransactionRecordORM,
)


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction record repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, record: TransactionRecord) -> TransactionRecord:
        """Persist a new record."""
        with store_errors(self._db):
            orm_record = self._to_orm(record)
            self._db.add(orm_record)
            self._db.commit()
            self._db.refresh(orm_record)
            return self._to_domain(orm_record)

    def get_by_id(self, txn_id: str) -> Optional[TransactionRecord]:
        """Retrieve record by ID."""
        with store_errors(self._db):
            orm_record = self._db.query(TransactionRecordORM).filter(
                TransactionRecordORM.txn_id == txn_id
            ).first()
            return self._to_domain(orm_record) if orm_record else None

    def list_by_user(self, user_id: str) -> list[TransactionRecord]:
        """List all records owned by a user, most recent first."""
        with store_errors(self._db):
            query = (
                self._db.query(TransactionRecordORM)
                .filter(TransactionRecordORM.user_id == user_id)
                .order_by(TransactionRecordORM.timestamp.desc())
            )
            return [self._to_domain(r) for r in query.all()]

    def list_history(self, account_id: str) -> list[TransactionRecord]:
        """List the records referenced by an account's history, in history order."""
        with store_errors(self._db):
            query = (
                self._db.query(TransactionRecordORM)
                .join(AccountHistoryORM, AccountHistoryORM.txn_id == TransactionRecordORM.txn_id)
                .filter(AccountHistoryORM.account_id == account_id)
                .order_by(AccountHistoryORM.seq)
            )
            return [self._to_domain(r) for r in query.all()]

    def list_missing_from_history(self, account_id: str) -> list[TransactionRecord]:
        """List records owned by an account but absent from its history, oldest first."""
        with store_errors(self._db):
            linked = (
                self._db.query(AccountHistoryORM.txn_id)
                .filter(AccountHistoryORM.account_id == account_id)
            )
            query = (
                self._db.query(TransactionRecordORM)
                .filter(
                    TransactionRecordORM.user_id == account_id,
                    TransactionRecordORM.txn_id.not_in(linked),
                )
                .order_by(TransactionRecordORM.timestamp)
            )
            return [self._to_domain(r) for r in query.all()]

    @staticmethod
    def _to_orm(record: TransactionRecord) -> TransactionRecordORM:
        """Convert domain model to ORM model."""
        return TransactionRecordORM(
            txn_id=record.txn_id,
            user_id=record.user_id,
            txn_type=record.txn_type,
            amount=record.amount,
            cryptocurrency=record.cryptocurrency,
            wallet_address=record.wallet_address,
            timestamp=record.timestamp,
        )

    @staticmethod
    def _to_domain(orm: TransactionRecordORM) -> TransactionRecord:
        """Convert ORM model to domain model."""
        return TransactionRecord(
            txn_id=orm.txn_id,
            user_id=orm.user_id,
            txn_type=orm.txn_type,
            amount=orm.amount,
            cryptocurrency=orm.cryptocurrency,
            wallet_address=orm.wallet_address,
            timestamp=to_utc(orm.timestamp),
        )
