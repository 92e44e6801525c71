import logging
import sqlite3

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import init_db
from .repo import create_txn, list_txns
from .settings import Settings, get_settings


logger = logging.getLogger(__name__)


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    init_db(settings)

    app = FastAPI(title="Expense Tracker API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_http_requests(request: Request, call_next):
        logger.info(
            "http_request_received method=%s path=%s",
            request.method,
            request.url.path,
        )
        response = await call_next(request)
        logger.info(
            "http_response_sent method=%s path=%s status_code=%s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return response

    @app.get("/api/test")
    def api_test():
        return {"body": "testing successful"}

    @app.get("/api/transaction")
    def get_transactions():
        try:
            transactions = list_txns(settings.db_path)
        except sqlite3.Error:
            logger.exception("fetch_transactions_failed db_path=%s", settings.db_path)
            return _error("Failed to fetch transactions")
        return [txn.to_dict() for txn in transactions]

    @app.post("/api/transaction")
    def post_transaction(payload: dict = Body(...)):
        try:
            transaction = create_txn(
                settings.db_path,
                name=payload.get("name"),
                description=payload.get("description"),
                date_time=payload.get("dateTime"),
                price=payload.get("price"),
            )
        except (sqlite3.Error, ValueError):
            logger.exception("create_transaction_failed db_path=%s", settings.db_path)
            return _error("Failed to create transaction")
        return transaction.to_dict()

    return app
