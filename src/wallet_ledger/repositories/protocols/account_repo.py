"""Account repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from wallet_ledger.domain.models import Account, BalanceSnapshot


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account with holdings and history by ID."""
        ...

    def apply_delta(
        self,
        account_id: str,
        currency: str,
        delta: Decimal,
    ) -> Optional[BalanceSnapshot]:
        """
        Atomically add ``delta`` to the balance and the currency holding.

        Negative deltas only apply when the holding covers the magnitude.
        Returns the post-update snapshot, or None when the account is missing
        or the guard rejects the debit (nothing is written in that case).
        """
        ...

    def append_history(self, account_id: str, txn_id: str) -> None:
        """Append a record id to the account's transaction history."""
        ...
