"""TransactionRecord domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from wallet_ledger.domain.models.enums import TransactionType

# Amounts are exact to 8 decimal places (one satoshi for BTC)
AMOUNT_DECIMALS = 8
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_DECIMALS)

MAX_CURRENCY_LENGTH = 20
MAX_WALLET_ADDRESS_LENGTH = 255


@dataclass(frozen=True)
class TransactionRecord:
    """
    Immutable log entry for one balance-affecting event.

    ``amount`` is the unsigned magnitude; the sign is implied by ``txn_type``.
    """

    txn_id: str
    user_id: str
    txn_type: TransactionType
    amount: Decimal
    cryptocurrency: str
    wallet_address: str
    timestamp: datetime

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str) and not isinstance(self.txn_type, TransactionType):
            object.__setattr__(self, "txn_type", TransactionType(self.txn_type))

    @property
    def signed_amount(self) -> Decimal:
        """Delta this record applied to the owner's balance."""
        return self.txn_type.signed(self.amount)
