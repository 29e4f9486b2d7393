"""Mini README: Finance engine for Pocket Ledger.

The ``ledger`` module owns the transaction collection and its persistence,
``summary`` derives totals from snapshots of it, ``storage`` provides the
durable backends, and ``errors`` holds the exceptions callers are expected
to handle.
"""

from .errors import LedgerError, StorageCorruptError, ValidationError, ValidationReason
from .ledger import STORAGE_KEY, LedgerStore, Transaction, TransactionKind, newest_first
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from .summary import LedgerTotals, MonthlyTotals, monthly_totals, summarise, totals

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "LedgerError",
    "LedgerStore",
    "LedgerTotals",
    "MonthlyTotals",
    "STORAGE_KEY",
    "StorageCorruptError",
    "Transaction",
    "TransactionKind",
    "ValidationError",
    "ValidationReason",
    "monthly_totals",
    "newest_first",
    "summarise",
    "totals",
]
