"""Enumerations for domain models."""

from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a wallet transaction."""

    SENT = "sent"
    RECEIVED = "received"

    def signed(self, amount: Decimal) -> Decimal:
        """Return the balance delta this transaction applies for ``amount``."""
        return amount if self is TransactionType.RECEIVED else -amount
