"""Mini README: FastAPI-powered dashboard and JSON API for Pocket Ledger.

Structure:
    * create_application - application factory wiring routes and templates.

The dashboard mirrors the single-page budget tracker: balance, income and
expense cards, a current-month line, an add form, and a newest-first list
with delete buttons. JSON endpoints expose the same operations for scripts.
The application holds one ``LedgerStore`` for its lifetime; every change is
persisted by the store before the response is sent.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..finance import (
    JsonFileStorage,
    LedgerStore,
    ValidationError,
    monthly_totals,
    newest_first,
    summarise,
    totals,
)
from ..logging_utils import configure_root_logger, get_logger
from .formatting import format_amount, format_date, format_signed_amount

LOGGER = get_logger(__name__)


def create_application(
    store: Optional[LedgerStore] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    if store is None:
        store = LedgerStore.open(
            JsonFileStorage(settings.data_directory),
            reset_on_corrupt=settings.reset_on_corrupt,
        )
    now = clock or (lambda: datetime.now(timezone.utc))

    app = FastAPI(title="Pocket Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["amount"] = format_amount
    templates.env.filters["local_date"] = format_date

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render balances, the monthly summary, and the transaction list."""

        snapshot = store.list()
        LOGGER.debug("Rendering dashboard with %s transactions", len(snapshot))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "totals": totals(snapshot),
                "month": monthly_totals(snapshot, now()),
                "transactions": [
                    (transaction, format_signed_amount(transaction, settings.currency_symbol))
                    for transaction in newest_first(snapshot)
                ],
                "currency_symbol": settings.currency_symbol,
            },
        )

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return every transaction, most recent first."""

        payload = [transaction.as_dict() for transaction in newest_first(store.list())]
        return JSONResponse({"transactions": payload})

    @app.post("/transactions", status_code=201)
    async def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        kind: str = Form("income"),
    ) -> JSONResponse:
        """Record a transaction from raw form input."""

        try:
            transaction = store.add(description, amount, kind)
        except ValidationError as error:
            LOGGER.info("Rejected transaction: %s", error)
            raise HTTPException(
                status_code=400,
                detail={"reason": error.reason.value, "message": str(error)},
            ) from error
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.post("/transactions/form")
    async def add_from_dashboard(
        description: str = Form(""),
        amount: str = Form(""),
        kind: str = Form("income"),
    ) -> RedirectResponse:
        """Handle the add form when scripts are unavailable."""

        try:
            store.add(description, amount, kind)
        except ValidationError as error:
            LOGGER.info("Rejected transaction: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        return RedirectResponse("/", status_code=303)

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: int) -> JSONResponse:
        """Remove a transaction; unknown ids are reported, not rejected."""

        return JSONResponse({"removed": store.remove(transaction_id)})

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_from_dashboard(transaction_id: int) -> RedirectResponse:
        """Handle the dashboard delete buttons."""

        store.remove(transaction_id)
        return RedirectResponse("/", status_code=303)

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return all-time and current-month totals as raw numbers."""

        return JSONResponse(summarise(store.list(), now()))

    return app
