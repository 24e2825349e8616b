"""FastAPI application for the wallet ledger."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wallet_ledger import __version__
from wallet_ledger.config.settings import get_settings
from wallet_ledger.config.logging_config import setup_logging
from wallet_ledger.repositories.sqlalchemy.database import init_db
from wallet_ledger.api.routers import accounts_router, transactions_router
from wallet_ledger.core.exceptions import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info("%s %s ready", app.title, __version__)
    yield


app = FastAPI(
    title=get_settings().app_name,
    description="Records sent/received cryptocurrency transactions against wallet balances",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(accounts_router)
app.include_router(transactions_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render ledger errors as ``{success, error, message}`` with the error's status."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "healthy"}
