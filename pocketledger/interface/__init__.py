"""Mini README: Interactive interfaces for Pocket Ledger.

Exports the FastAPI application factory powering the browser dashboard and
JSON API. The command line entry point lives in ``ledger_console.py`` at the
repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
