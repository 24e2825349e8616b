"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class BalanceSnapshot:
    """Balance and holdings exactly as left by one atomic account mutation."""

    balance: Decimal
    holdings: dict[str, Decimal] = field(default_factory=dict)


@dataclass
class Account:
    """
    A user's wallet account.

    ``balance`` is a denormalized additive mirror of every delta applied to
    ``holdings``. Each holding is non-negative. ``transaction_history`` holds
    record ids in creation order; it is an index that may lag the record set.
    """

    account_id: str
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    holdings: dict[str, Decimal] = field(default_factory=dict)
    transaction_history: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = field(default=None)

    def holding(self, currency: str) -> Decimal:
        """Return the holding for ``currency`` (zero if never touched)."""
        return self.holdings.get(currency, Decimal("0"))
