"""Mini README: Core package initializer for Pocket Ledger.

Pocket Ledger records income and expense entries, keeps them in local
storage, and derives balances and monthly summaries from them. The finance
engine lives in ``pocketledger.finance``; the browser dashboard and JSON API
live in ``pocketledger.interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
