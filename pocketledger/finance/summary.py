"""Mini README: Aggregate statistics derived from ledger snapshots.

Structure:
    * LedgerTotals - all-time income, expense, and balance.
    * MonthlyTotals - income and expense within one calendar month.
    * totals / monthly_totals - pure derivations over a transaction snapshot.
    * summarise - dashboard payload combining both.

The functions only read what they are given. Callers pass ``store.list()``
rather than the store itself, and rounding is left to presentation code.
Month matching happens in the local timezone of the running process.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, Iterable

from .ledger import Transaction, TransactionKind


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """All-time totals."""

    income_total: float
    expense_total: float
    balance: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MonthlyTotals:
    """Totals for the calendar month containing the reference instant."""

    month_income: float
    month_expense: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _sum_by_kind(transactions: Iterable[Transaction]) -> Dict[TransactionKind, float]:
    sums = {TransactionKind.INCOME: 0.0, TransactionKind.EXPENSE: 0.0}
    for transaction in transactions:
        sums[transaction.kind] += transaction.amount
    return sums


def totals(transactions: Iterable[Transaction]) -> LedgerTotals:
    """Sum income and expense over every transaction."""

    sums = _sum_by_kind(transactions)
    income = sums[TransactionKind.INCOME]
    expense = sums[TransactionKind.EXPENSE]
    return LedgerTotals(income_total=income, expense_total=expense, balance=income - expense)


def monthly_totals(transactions: Iterable[Transaction], now: datetime) -> MonthlyTotals:
    """Sum income and expense for transactions in the same local month as ``now``.

    Aware datetimes are converted to the local timezone before comparing;
    naive ones are taken to be local already.
    """

    local_now = now.astimezone()
    in_month = (
        transaction
        for transaction in transactions
        if _same_month(transaction.occurred_at.astimezone(), local_now)
    )
    sums = _sum_by_kind(in_month)
    return MonthlyTotals(
        month_income=sums[TransactionKind.INCOME],
        month_expense=sums[TransactionKind.EXPENSE],
    )


def _same_month(moment: datetime, reference: datetime) -> bool:
    return moment.year == reference.year and moment.month == reference.month


def summarise(transactions: Iterable[Transaction], now: datetime) -> Dict[str, float]:
    """Combine all-time and monthly totals into one payload for dashboards."""

    snapshot = tuple(transactions)
    payload = totals(snapshot).as_dict()
    payload.update(monthly_totals(snapshot, now).as_dict())
    return payload
