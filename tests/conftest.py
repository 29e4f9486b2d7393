"""Mini README: Shared fixtures for the Pocket Ledger test-suite.

Structure:
    * FakeClock - controllable clock handed to ``LedgerStore``.
    * storage / clock / store - fresh in-memory ledger per test.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from pocketledger.finance import InMemoryStorage, LedgerStore


class FakeClock:
    """Return a fixed instant until advanced explicitly."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> None:
        self.current = self.current + timedelta(**delta)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 15, 12, 0, 0))


@pytest.fixture
def store(storage: InMemoryStorage, clock: FakeClock) -> LedgerStore:
    return LedgerStore.open(storage, clock=clock)
