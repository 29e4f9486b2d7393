"""Mini README: Tests for the summary calculator.

These tests confirm the all-time totals, the balance identity, monthly
isolation, and that the basic add/remove flows produce the expected figures.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

import pytest

from pocketledger.finance import (
    LedgerStore,
    Transaction,
    TransactionKind,
    monthly_totals,
    summarise,
    totals,
)


def _transaction(transaction_id: int, amount: float, kind: TransactionKind, when: datetime) -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        description=f"entry {transaction_id}",
        amount=amount,
        kind=kind,
        occurred_at=when,
    )


def test_totals_of_empty_collection_are_zero() -> None:
    result = totals([])

    assert (result.income_total, result.expense_total, result.balance) == (0.0, 0.0, 0.0)
    assert monthly_totals([], datetime(2024, 5, 1)).as_dict() == {
        "month_income": 0.0,
        "month_expense": 0.0,
    }


def test_basic_flow_then_removal(store: LedgerStore) -> None:
    """Salary and rent produce the expected balance, and removal updates it."""

    store.add("Salary", 5000, TransactionKind.INCOME)
    rent = store.add("Rent", 1500, TransactionKind.EXPENSE)

    assert totals(store.list()).as_dict() == {
        "income_total": 5000.0,
        "expense_total": 1500.0,
        "balance": 3500.0,
    }

    store.remove(rent.transaction_id)

    assert totals(store.list()).as_dict() == {
        "income_total": 5000.0,
        "expense_total": 0.0,
        "balance": 5000.0,
    }


def test_balance_identity_and_non_negative_totals() -> None:
    """Balance equals income minus expense and neither sum goes negative."""

    when = datetime(2024, 5, 1)
    transactions = [
        _transaction(1, 0.1, TransactionKind.INCOME, when),
        _transaction(2, 0.2, TransactionKind.INCOME, when),
        _transaction(3, 12.75, TransactionKind.EXPENSE, when),
    ]

    result = totals(transactions)

    assert result.balance == result.income_total - result.expense_total
    assert result.income_total == pytest.approx(0.3)
    assert result.expense_total == pytest.approx(12.75)
    assert result.income_total >= 0 and result.expense_total >= 0


def test_monthly_totals_exclude_other_months() -> None:
    """Prior months and the same month of another year are left out."""

    now = datetime(2024, 5, 20, 18, 0)
    transactions = [
        _transaction(1, 100.0, TransactionKind.INCOME, datetime(2024, 5, 1, 9, 0)),
        _transaction(2, 40.0, TransactionKind.EXPENSE, datetime(2024, 5, 31, 23, 0)),
        _transaction(3, 999.0, TransactionKind.INCOME, datetime(2024, 4, 30, 23, 59)),
        _transaction(4, 555.0, TransactionKind.EXPENSE, datetime(2023, 5, 10, 12, 0)),
    ]

    month = monthly_totals(transactions, now)

    assert month.month_income == pytest.approx(100.0)
    assert month.month_expense == pytest.approx(40.0)
    assert totals(transactions).income_total == pytest.approx(1099.0)


def test_calculations_do_not_mutate_input() -> None:
    transactions = [_transaction(1, 10.0, TransactionKind.INCOME, datetime(2024, 5, 1))]
    snapshot = list(transactions)

    totals(transactions)
    monthly_totals(transactions, datetime(2024, 5, 2))

    assert transactions == snapshot


def test_summarise_accepts_single_pass_iterables() -> None:
    """The dashboard payload works even when handed a generator."""

    now = datetime(2024, 5, 20)
    transactions = [
        _transaction(1, 200.0, TransactionKind.INCOME, datetime(2024, 5, 2)),
        _transaction(2, 50.0, TransactionKind.EXPENSE, datetime(2024, 3, 2)),
    ]

    payload = summarise((transaction for transaction in transactions), now)

    assert payload == {
        "income_total": 200.0,
        "expense_total": 50.0,
        "balance": 150.0,
        "month_income": 200.0,
        "month_expense": 0.0,
    }


@pytest.fixture
def kolkata_time(monkeypatch: pytest.MonkeyPatch):
    """Run the process in UTC+05:30 for the duration of a test."""

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    monkeypatch.setenv("TZ", "IST-5:30")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_monthly_totals_group_utc_instants_by_local_month(kolkata_time) -> None:
    """A late-May UTC entry is already June on the local calendar."""

    late_may_utc = datetime(2024, 5, 31, 22, 30, tzinfo=timezone.utc)
    transactions = [
        _transaction(1, 80.0, TransactionKind.INCOME, late_may_utc),
        _transaction(2, 20.0, TransactionKind.EXPENSE, datetime(2024, 5, 31, 18, 0, tzinfo=timezone.utc)),
    ]

    june = monthly_totals(transactions, datetime(2024, 6, 10, tzinfo=timezone.utc))
    may = monthly_totals(transactions, datetime(2024, 5, 10, tzinfo=timezone.utc))

    assert june.as_dict() == {"month_income": 80.0, "month_expense": 0.0}
    assert may.as_dict() == {"month_income": 0.0, "month_expense": 20.0}
