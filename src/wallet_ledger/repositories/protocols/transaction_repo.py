"""Transaction record repository protocol."""

from typing import Protocol, Optional

from wallet_ledger.domain.models import TransactionRecord


class TransactionRepository(Protocol):
    """Interface for transaction record data access."""

    def create(self, record: TransactionRecord) -> TransactionRecord:
        """Persist a new record."""
        ...

    def get_by_id(self, txn_id: str) -> Optional[TransactionRecord]:
        """Retrieve record by ID."""
        ...

    def list_by_user(self, user_id: str) -> list[TransactionRecord]:
        """List all records owned by a user, most recent first."""
        ...

    def list_history(self, account_id: str) -> list[TransactionRecord]:
        """List the records referenced by an account's history, in history order."""
        ...

    def list_missing_from_history(self, account_id: str) -> list[TransactionRecord]:
        """List records owned by an account but absent from its history, oldest first."""
        ...
