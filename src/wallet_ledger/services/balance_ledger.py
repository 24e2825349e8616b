"""Balance ledger: records sent/received transactions against account balances."""

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Union

from wallet_ledger.core.timezone import now_utc
from wallet_ledger.core.exceptions import (
    ValidationError,
    NotFoundError,
    AccountNotFoundError,
    InsufficientFundsError,
    ForbiddenError,
)
from wallet_ledger.domain.models import (
    AMOUNT_DECIMALS,
    AMOUNT_QUANTUM,
    MAX_CURRENCY_LENGTH,
    MAX_WALLET_ADDRESS_LENGTH,
    Account,
    TransactionRecord,
    TransactionType,
)
from wallet_ledger.repositories.protocols import AccountRepository, TransactionRepository

logger = logging.getLogger(__name__)

MAX_AMOUNT = Decimal(10) ** 10


@dataclass
class RecordedTransaction:
    """Result of a successful record_transaction call."""

    record: TransactionRecord
    balance: Decimal
    holdings: dict[str, Decimal] = field(default_factory=dict)


@dataclass
class AccountHistory:
    """An account together with its history resolved to records."""

    account: Account
    transactions: list[TransactionRecord] = field(default_factory=list)


class BalanceLedger:
    """
    Applies signed balance deltas to wallet accounts.

    The service keeps no state between calls and takes no locks of its own:
    the guard-and-mutate step is a single store transaction inside
    ``AccountRepository.apply_delta``. Creating the record and appending it to
    the account's history are two further, independent writes. If a call dies
    between them the account balance is still authoritative and
    ``reconcile_history`` re-derives the missing history pointers from the
    record table.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        transaction_repo: TransactionRepository,
    ):
        self._account_repo = account_repo
        self._transaction_repo = transaction_repo

    def open_account(self, account_id: str) -> Account:
        """
        Register an empty account for an authenticated identity.

        Args:
            account_id: The caller's user id

        Returns:
            Created Account with zero balance and no holdings
        """
        if not account_id or not account_id.strip():
            raise ValidationError("Account id is required")
        if self._account_repo.get_by_id(account_id):
            raise ValidationError(f"Account already exists: {account_id}")

        account = Account(account_id=account_id, created_at=now_utc())
        return self._account_repo.create(account)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)
        return account

    def record_transaction(
        self,
        user_id: str,
        txn_type: Union[TransactionType, str],
        amount: Union[Decimal, int, float, str],
        cryptocurrency: str,
        wallet_address: str,
    ) -> RecordedTransaction:
        """
        Apply a sent/received transaction to the user's account and log it.

        Validation happens before the store is touched. On any failure nothing
        is written.

        Raises:
            ValidationError: unknown type, non-positive, non-finite or too
                precise amount, missing or overlong currency or address
            InsufficientFundsError: a debit exceeds the currency holding
            AccountNotFoundError: the account does not exist
            StoreUnavailableError: the store failed
        """
        txn_type = self._parse_type(txn_type)
        amount = self._parse_amount(amount)
        currency = self._parse_currency(cryptocurrency)
        wallet_address = self._parse_wallet_address(wallet_address)

        snapshot = self._account_repo.apply_delta(user_id, currency, txn_type.signed(amount))
        if snapshot is None:
            if txn_type is TransactionType.RECEIVED:
                raise AccountNotFoundError(user_id)
            if self._account_repo.get_by_id(user_id) is None:
                raise AccountNotFoundError(user_id)
            logger.info("Rejected debit of %s %s for %s: insufficient funds", amount, currency, user_id)
            raise InsufficientFundsError(currency, str(amount))

        record = self._transaction_repo.create(
            TransactionRecord(
                txn_id=str(uuid.uuid4()),
                user_id=user_id,
                txn_type=txn_type,
                amount=amount,
                cryptocurrency=currency,
                wallet_address=wallet_address,
                timestamp=now_utc(),
            )
        )
        self._account_repo.append_history(user_id, record.txn_id)

        logger.info(
            "Recorded %s of %s %s for %s (txn %s)",
            txn_type.value, amount, currency, user_id, record.txn_id,
        )
        return RecordedTransaction(
            record=record,
            balance=snapshot.balance,
            holdings=snapshot.holdings,
        )

    def list_transactions(self, user_id: str) -> list[TransactionRecord]:
        """List a user's records, most recent first. Reads the record table, not the history index."""
        return self._transaction_repo.list_by_user(user_id)

    def get_transaction(self, user_id: str, transaction_id: str) -> TransactionRecord:
        """Get a record by ID, enforcing that ``user_id`` owns it."""
        record = self._transaction_repo.get_by_id(transaction_id)
        if not record:
            raise NotFoundError("Transaction", transaction_id)
        if record.user_id != user_id:
            raise ForbiddenError()
        return record

    def get_account_with_history(self, account_id: str) -> AccountHistory:
        """Get an account with its history pointers resolved, in history order."""
        account = self.get_account(account_id)
        return AccountHistory(
            account=account,
            transactions=self._transaction_repo.list_history(account_id),
        )

    def reconcile_history(self, account_id: str) -> int:
        """
        Append every record the account owns but whose id is missing from its history.

        Returns:
            Number of history entries appended
        """
        self.get_account(account_id)
        missing = self._transaction_repo.list_missing_from_history(account_id)
        for record in missing:
            self._account_repo.append_history(account_id, record.txn_id)
        if missing:
            logger.warning("Reconciled %d history entries for %s", len(missing), account_id)
        return len(missing)

    @staticmethod
    def _parse_type(value: Union[TransactionType, str]) -> TransactionType:
        try:
            return TransactionType(value)
        except ValueError:
            raise ValidationError("Invalid transaction type") from None

    @staticmethod
    def _parse_amount(value: Union[Decimal, int, float, str]) -> Decimal:
        if isinstance(value, bool) or value is None:
            raise ValidationError("Amount must be a number")
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise ValidationError("Amount must be a number") from None
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be greater than zero")
        if amount >= MAX_AMOUNT:
            raise ValidationError(f"Amount must be less than {MAX_AMOUNT}")
        if amount.quantize(AMOUNT_QUANTUM) != amount:
            raise ValidationError(f"Amount must have at most {AMOUNT_DECIMALS} decimal places")
        return amount

    @staticmethod
    def _parse_currency(value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Cryptocurrency is required")
        symbol = value.strip().upper()
        if len(symbol) > MAX_CURRENCY_LENGTH:
            raise ValidationError(f"Cryptocurrency must be at most {MAX_CURRENCY_LENGTH} characters")
        return symbol

    @staticmethod
    def _parse_wallet_address(value: str) -> str:
        if not isinstance(value, str):
            raise ValidationError("Wallet address must be a string")
        if len(value) > MAX_WALLET_ADDRESS_LENGTH:
            raise ValidationError(f"Wallet address must be at most {MAX_WALLET_ADDRESS_LENGTH} characters")
        return value
