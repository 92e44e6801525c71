import logging
from pathlib import Path

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .client import ApiClient, ApiError, build_payload
from .logic import (
    CURRENCY_SYMBOL,
    amount_color,
    compute_balance,
    format_amount,
    format_date_time,
)
from .settings import Settings, get_settings
from .view_state import ViewState, load_complete, set_field, submit_complete


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

templates = Jinja2Templates(directory=str(PROJECT_ROOT / "templates"))
templates.env.filters["amount"] = format_amount
templates.env.filters["amount_color"] = amount_color
templates.env.filters["date_time"] = format_date_time


def _build_context(state: ViewState) -> dict:
    balance = compute_balance(state.transactions)
    return {
        "state": state,
        "transactions": state.transactions,
        "balance": balance,
        "currency": CURRENCY_SYMBOL,
    }


def create_app(
    settings: Settings | None = None, api_client: ApiClient | None = None
) -> FastAPI:
    settings = settings or get_settings()
    client = api_client or ApiClient(settings.api_url)

    app = FastAPI(title="Expense Tracker")
    app.mount("/static", StaticFiles(directory=str(PROJECT_ROOT / "static")), name="static")
    app.state.view = ViewState()

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        try:
            transactions = client.get_transactions()
        except ApiError:
            logger.exception("load_transactions_failed api_url=%s", settings.api_url)
        else:
            app.state.view = load_complete(app.state.view, transactions)
        return templates.TemplateResponse(
            request, "index.html", _build_context(app.state.view)
        )

    @app.post("/transactions", response_class=HTMLResponse)
    def add_transaction(
        request: Request,
        name: str = Form(default=""),
        description: str = Form(default=""),
        date_time: str = Form(default="", alias="dateTime"),
    ):
        state = app.state.view
        state = set_field(state, "name", name)
        state = set_field(state, "description", description)
        state = set_field(state, "date_time", date_time)
        app.state.view = state

        missing = state.missing_fields()
        if missing:
            raise HTTPException(
                status_code=400, detail=f"required: {', '.join(missing)}"
            )

        payload = build_payload(
            name=state.name,
            description=state.description,
            date_time=state.date_time,
        )
        try:
            created = client.add_transaction(payload)
        except ApiError:
            logger.exception("submit_transaction_failed api_url=%s", settings.api_url)
        else:
            logger.info("transaction_submitted id=%s", created.id)
            app.state.view = submit_complete(app.state.view)

        context = _build_context(app.state.view)
        if request.headers.get("HX-Request") == "true":
            return HTMLResponse(templates.get_template("_form.html").render(**context))
        return templates.TemplateResponse(request, "index.html", context)

    return app
