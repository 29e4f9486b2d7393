"""Mini README: Persistent income and expense ledger.

Structure:
    * TransactionKind - enum separating income from expense entries.
    * Transaction - immutable record of a single money movement.
    * LedgerStore - owns the collection, validates additions, persists changes.
    * newest_first - display ordering helper (descending by identifier).

Every successful ``add`` and every ``remove`` that finds its target writes the
whole collection to storage before returning, so a reload always sees the
latest state. Stored records use the ``id``/``description``/``amount``/
``type``/``date`` layout written by the earlier browser dashboard, which
means existing exports load unchanged.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from .errors import StorageCorruptError, ValidationError, ValidationReason
from .storage import KeyValueStorage

LOGGER = get_logger(__name__)

STORAGE_KEY = "transactions"
_RECORD_FIELDS = ("id", "description", "amount", "type", "date")

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TransactionKind(str, Enum):
    """Enumerate the supported transaction directions."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValidationError(
                ValidationReason.INVALID_KIND, f"Unsupported transaction type: {value!r}"
            ) from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent one ledger entry. Direction lives in ``kind``, never the sign."""

    transaction_id: int
    description: str
    amount: float
    kind: TransactionKind
    occurred_at: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction in its persisted layout."""

        return {
            "id": self.transaction_id,
            "description": self.description,
            "amount": self.amount,
            "type": self.kind.value,
            "date": self.occurred_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: object) -> "Transaction":
        """Rebuild a transaction from its persisted layout.

        Raises ``ValueError`` describing the first problem found.
        """

        if not isinstance(payload, dict):
            raise ValueError("record is not an object")
        missing = [name for name in _RECORD_FIELDS if name not in payload]
        if missing:
            raise ValueError(f"missing fields {', '.join(missing)}")

        transaction_id = payload["id"]
        if isinstance(transaction_id, bool) or not isinstance(transaction_id, int):
            raise ValueError("id must be an integer")
        description = payload["description"]
        if not isinstance(description, str) or not description.strip():
            raise ValueError("description must be a non-empty string")
        amount = payload["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError("amount must be a number")
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError("amount must be a finite positive number")
        kind = payload["type"]
        if not isinstance(kind, str):
            raise ValueError("type must be a string")
        try:
            parsed_kind = TransactionKind(kind)
        except ValueError as error:
            raise ValueError(f"unknown type {kind!r}") from error

        return cls(
            transaction_id=transaction_id,
            description=description,
            amount=float(amount),
            kind=parsed_kind,
            occurred_at=_parse_timestamp(payload["date"]),
        )


def _parse_timestamp(value: object) -> datetime:
    """Parse ISO-8601 text, including the ``Z`` suffix browsers emit."""

    if not isinstance(value, str):
        raise ValueError("date must be an ISO-8601 string")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as error:
        raise ValueError(f"date {value!r} is not ISO-8601") from error


def _coerce_amount(amount: Union[str, int, float]) -> float:
    """Validate user supplied amounts, accepting numeric strings."""

    if isinstance(amount, bool):
        raise ValidationError(ValidationReason.INVALID_AMOUNT)
    if isinstance(amount, str):
        try:
            value = float(amount.strip())
        except ValueError as error:
            raise ValidationError(ValidationReason.INVALID_AMOUNT) from error
    elif isinstance(amount, (int, float)):
        try:
            value = float(amount)
        except OverflowError as error:
            raise ValidationError(ValidationReason.INVALID_AMOUNT) from error
    else:
        raise ValidationError(ValidationReason.INVALID_AMOUNT)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(ValidationReason.INVALID_AMOUNT)
    return value


def newest_first(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Return transactions ordered for display, most recently created first."""

    return sorted(transactions, key=lambda transaction: transaction.transaction_id, reverse=True)


class LedgerStore:
    """Own the transaction collection and keep it persisted."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Optional[Clock] = None,
        reset_on_corrupt: bool = False,
    ) -> None:
        self._storage = storage
        self._clock = clock or _utc_now
        self._reset_on_corrupt = reset_on_corrupt
        self._transactions: Dict[int, Transaction] = {}
        self._last_issued_id = 0

    @classmethod
    def open(
        cls,
        storage: KeyValueStorage,
        *,
        clock: Optional[Clock] = None,
        reset_on_corrupt: bool = False,
    ) -> "LedgerStore":
        """Construct a store and restore its persisted state."""

        return cls(storage, clock=clock, reset_on_corrupt=reset_on_corrupt).load()

    def load(self) -> "LedgerStore":
        """Replace the in-memory collection with the persisted one."""

        raw = self._storage.get(STORAGE_KEY)
        if raw is None:
            self._transactions = {}
            LOGGER.debug("No stored ledger found; starting empty")
            return self

        try:
            transactions = self._deserialise(raw)
        except StorageCorruptError as error:
            if not self._reset_on_corrupt:
                raise
            LOGGER.warning("%s; starting with an empty ledger", error)
            transactions = {}

        self._transactions = transactions
        if transactions:
            self._last_issued_id = max(self._last_issued_id, max(transactions))
        LOGGER.debug("Ledger loaded with %s transactions", len(self._transactions))
        return self

    def add(
        self,
        description: str,
        amount: Union[str, int, float],
        kind: Union[TransactionKind, str],
    ) -> Transaction:
        """Validate and record a new transaction, returning it."""

        cleaned = description.strip() if isinstance(description, str) else ""
        if not cleaned:
            raise ValidationError(ValidationReason.EMPTY_DESCRIPTION)
        value = _coerce_amount(amount)
        if not isinstance(kind, TransactionKind):
            kind = TransactionKind.from_str(kind)

        occurred_at = self._clock()
        transaction = Transaction(
            transaction_id=self._next_id(occurred_at),
            description=cleaned,
            amount=value,
            kind=kind,
            occurred_at=occurred_at,
        )
        updated = dict(self._transactions)
        updated[transaction.transaction_id] = transaction
        self._commit(updated)
        self._last_issued_id = transaction.transaction_id
        LOGGER.info(
            "Recorded %s %s (%s) as transaction %s",
            kind.value,
            value,
            cleaned,
            transaction.transaction_id,
        )
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Remove a transaction if present; report whether anything changed."""

        if transaction_id not in self._transactions:
            LOGGER.debug("Transaction %s not found; nothing removed", transaction_id)
            return False
        updated = dict(self._transactions)
        del updated[transaction_id]
        self._commit(updated)
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def list(self) -> Tuple[Transaction, ...]:
        """Return an immutable snapshot of the collection in no particular order."""

        return tuple(self._transactions.values())

    def __len__(self) -> int:
        return len(self._transactions)

    def _next_id(self, occurred_at: datetime) -> int:
        """Issue a unique id that never repeats, even within one millisecond."""

        candidate = int(occurred_at.timestamp() * 1000)
        return max(candidate, self._last_issued_id + 1)

    def _commit(self, transactions: Dict[int, Transaction]) -> None:
        """Write ``transactions`` to storage, then adopt them in memory."""

        records = [transaction.as_dict() for transaction in transactions.values()]
        self._storage.set(STORAGE_KEY, json.dumps(records, ensure_ascii=False))
        self._transactions = transactions

    @staticmethod
    def _deserialise(raw: str) -> Dict[int, Transaction]:
        try:
            payload = json.loads(raw)
        except (ValueError, OverflowError) as error:
            raise StorageCorruptError(STORAGE_KEY, f"invalid JSON ({error})") from error
        if not isinstance(payload, list):
            raise StorageCorruptError(STORAGE_KEY, "expected a list of transactions")

        transactions: Dict[int, Transaction] = {}
        for index, record in enumerate(payload):
            try:
                transaction = Transaction.from_dict(record)
            except (ValueError, OverflowError) as error:
                raise StorageCorruptError(STORAGE_KEY, f"record {index}: {error}") from error
            if transaction.transaction_id in transactions:
                raise StorageCorruptError(
                    STORAGE_KEY,
                    f"record {index}: duplicate id {transaction.transaction_id}",
                )
            transactions[transaction.transaction_id] = transaction
        return transactions
