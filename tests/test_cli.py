"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from ledger_console import cli
from pocketledger.finance import STORAGE_KEY, JsonFileStorage

runner = CliRunner()


def test_add_list_and_summary(tmp_path: Path) -> None:
    """Entries added from the terminal show up in the list and the balance."""

    directory = ["--data-directory", str(tmp_path)]
    assert runner.invoke(cli, ["add", "Salary", "5000", *directory]).exit_code == 0
    assert runner.invoke(cli, ["add", "Rent", "1500", "--kind", "expense", *directory]).exit_code == 0

    listed = runner.invoke(cli, ["list", *directory])
    assert listed.exit_code == 0
    assert listed.output.index("Rent") < listed.output.index("Salary")

    summary = runner.invoke(cli, ["summary", *directory])
    assert "Balance: ₹3500.00" in summary.output


def test_add_rejects_zero_amount(tmp_path: Path) -> None:
    result = runner.invoke(cli, ["add", "Coffee", "0", "--data-directory", str(tmp_path)])

    assert result.exit_code == 1
    assert JsonFileStorage(tmp_path).get(STORAGE_KEY) is None


def test_remove_unknown_id_is_not_an_error(tmp_path: Path) -> None:
    result = runner.invoke(cli, ["remove", "42", "--data-directory", str(tmp_path)])

    assert result.exit_code == 0
    assert "No transaction with id 42" in result.output


def test_corrupt_ledger_exits_with_error(tmp_path: Path) -> None:
    JsonFileStorage(tmp_path).set(STORAGE_KEY, "{broken")

    result = runner.invoke(cli, ["list", "--data-directory", str(tmp_path)])

    assert result.exit_code == 2
