"""Mini README: Entry point CLI for Pocket Ledger.

This script exposes a Typer CLI that starts the web dashboard or works with
the ledger directly from a terminal: add and remove entries, list them newest
first, and print the balance plus the current month's totals. Every command
reads settings from the environment and accepts ``--data-directory`` to point
at a different ledger.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.finance import (
    JsonFileStorage,
    LedgerStore,
    LedgerError,
    ValidationError,
    monthly_totals,
    newest_first,
    totals,
)
from pocketledger.interface.formatting import format_amount, format_date, format_signed_amount
from pocketledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Record income and expenses and review your balance.")

DATA_DIRECTORY_OPTION = typer.Option(
    None, "--data-directory", help="Directory holding the ledger file."
)


def _open_store(data_directory: Optional[Path]) -> LedgerStore:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    storage = JsonFileStorage(data_directory or settings.data_directory)
    try:
        return LedgerStore.open(storage, reset_on_corrupt=settings.reset_on_corrupt)
    except LedgerError as error:
        typer.echo(f"Unable to load ledger: {error}", err=True)
        raise typer.Exit(code=2) from error


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open 0.0.0.0 directly, so point people at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Pocket Ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Positive amount."),
    kind: str = typer.Option("income", "--kind", "-k", help="income or expense."),
    data_directory: Optional[Path] = DATA_DIRECTORY_OPTION,
) -> None:
    """Record a new transaction."""

    store = _open_store(data_directory)
    try:
        transaction = store.add(description, amount, kind)
    except ValidationError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error
    typer.echo(f"Added transaction {transaction.transaction_id}.")


@cli.command()
def remove(
    transaction_id: int = typer.Argument(..., help="Identifier shown by 'list'."),
    data_directory: Optional[Path] = DATA_DIRECTORY_OPTION,
) -> None:
    """Delete a transaction."""

    store = _open_store(data_directory)
    if store.remove(transaction_id):
        typer.echo(f"Removed transaction {transaction_id}.")
    else:
        typer.echo(f"No transaction with id {transaction_id}.")


@cli.command("list")
def list_transactions(data_directory: Optional[Path] = DATA_DIRECTORY_OPTION) -> None:
    """Show transactions, most recent first."""

    store = _open_store(data_directory)
    symbol = get_settings().currency_symbol
    transactions = newest_first(store.list())
    if not transactions:
        typer.echo("No transactions yet.")
        return
    for transaction in transactions:
        typer.echo(
            f"{transaction.transaction_id}  {transaction.description}"
            f" ({format_date(transaction.occurred_at)})"
            f"  {format_signed_amount(transaction, symbol)}"
        )


@cli.command()
def summary(data_directory: Optional[Path] = DATA_DIRECTORY_OPTION) -> None:
    """Print the balance and this month's income and expense."""

    store = _open_store(data_directory)
    symbol = get_settings().currency_symbol
    snapshot = store.list()
    overall = totals(snapshot)
    month = monthly_totals(snapshot, datetime.now(timezone.utc))
    typer.echo(f"Balance: {symbol}{format_amount(overall.balance)}")
    typer.echo(f"Income: {symbol}{format_amount(overall.income_total)}")
    typer.echo(f"Expense: {symbol}{format_amount(overall.expense_total)}")
    typer.echo(
        f"This month - Income: {symbol}{format_amount(month.month_income)}"
        f" | Expense: {symbol}{format_amount(month.month_expense)}"
    )


if __name__ == "__main__":
    cli()
