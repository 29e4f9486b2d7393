"""Mini README: Exceptions raised by the finance engine.

Structure:
    * LedgerError - base class for every ledger failure.
    * ValidationReason - why an ``add`` request was rejected.
    * ValidationError - rejected input; the ledger is left untouched.
    * StorageCorruptError - persisted data exists but cannot be parsed.
"""

from __future__ import annotations

from enum import Enum


class LedgerError(Exception):
    """Base class for ledger failures."""


class ValidationReason(str, Enum):
    """Enumerate the ways an ``add`` request can be invalid."""

    EMPTY_DESCRIPTION = "empty_description"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_KIND = "invalid_kind"


_DEFAULT_MESSAGES = {
    ValidationReason.EMPTY_DESCRIPTION: "Please enter a description.",
    ValidationReason.INVALID_AMOUNT: "Please enter a valid positive amount.",
    ValidationReason.INVALID_KIND: "Transaction type must be 'income' or 'expense'.",
}


class ValidationError(LedgerError, ValueError):
    """Input rejected before any mutation took place."""

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or _DEFAULT_MESSAGES[reason])


class StorageCorruptError(LedgerError):
    """Stored ledger content does not match the expected record layout."""

    def __init__(self, key: str, detail: str) -> None:
        self.key = key
        super().__init__(f"Stored data under '{key}' is corrupt: {detail}")
