"""Mini README: Display helpers shared by the dashboard and the CLI.

The finance engine returns raw floats and datetimes; these helpers turn them
into the strings people see. Dates are shown in the local timezone.
"""

from __future__ import annotations

from datetime import datetime

from ..finance import Transaction, TransactionKind


def format_amount(value: float) -> str:
    """Render an amount with two decimal places."""

    return f"{value:.2f}"


def format_signed_amount(transaction: Transaction, currency_symbol: str = "") -> str:
    """Prefix expenses with ``-`` and income with ``+``."""

    sign = "-" if transaction.kind is TransactionKind.EXPENSE else "+"
    return f"{sign}{currency_symbol}{format_amount(transaction.amount)}"


def format_date(moment: datetime) -> str:
    """Render ``d/m/yyyy`` in local time without zero padding."""

    local = moment.astimezone()
    return f"{local.day}/{local.month}/{local.year}"
