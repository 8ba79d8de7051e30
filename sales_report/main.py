import logging
from contextlib import asynccontextmanager
from typing import Iterator, Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from sales_report.config import config
from sales_report.engine import (
    bar_chart_report,
    combined_report,
    listing_report,
    pie_chart_report,
    statistics_report,
)
from sales_report.exceptions import SalesReportError
from sales_report.ingest import load
from sales_report.logging_conf import setup_logging
from sales_report.models import QueryParams, Report
from sales_report.store import store

logger = logging.getLogger(__name__)


def get_http_client() -> Iterator[httpx.Client]:
    with httpx.Client(timeout=config.FETCH_TIMEOUT) as client:
        yield client


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    if config.LOAD_ON_STARTUP:
        try:
            with httpx.Client(timeout=config.FETCH_TIMEOUT) as client:
                load(store, client)
        except SalesReportError:
            logger.warning("Initial load failed, starting with an empty store", exc_info=True)
    yield


app = FastAPI(
    title="Sales Report Service",
    version="1.0.0",
    description="Monthly listings, statistics and chart data over product transactions",
    lifespan=lifespan,
)


@app.exception_handler(SalesReportError)
async def sales_report_error_handler(request: Request, exc: SalesReportError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def query_params(
    month: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
) -> QueryParams:
    # raw strings so malformed values degrade to empty results instead of a 422
    return QueryParams.parse(month=month, search=search, page=page, per_page=per_page)


def _dump(result) -> dict:
    return result.model_dump(mode="json", by_alias=True, exclude_unset=True)


@app.get("/", summary="Welcome message")
def index():
    return {"message": "Welcome to your API!"}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.get("/initialize-database", summary="Replace the store with the remote dataset")
def initialize_database(client: httpx.Client = Depends(get_http_client)):
    load(store, client)
    return {"message": "Database initialized successfully"}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/transactions", summary="List transactions for a month, with search and paging")
def list_transactions(params: QueryParams = Depends(query_params)):
    return _dump(listing_report(store.snapshot(), params))


@app.get("/statistics", summary="Sale amount and item counts for a month")
def get_statistics(params: QueryParams = Depends(query_params)):
    return _dump(statistics_report(store.snapshot(), params))


@app.get("/bar-chart", summary="Item counts per price range for a month")
def get_bar_chart(params: QueryParams = Depends(query_params)):
    return _dump(bar_chart_report(store.snapshot(), params))


@app.get("/pie-chart", summary="Item counts per category for a month")
def get_pie_chart(params: QueryParams = Depends(query_params)):
    return _dump(pie_chart_report(store.snapshot(), params))


@app.get("/combined-response", summary="Listing, statistics and pie chart in one payload")
def get_combined_response(params: QueryParams = Depends(query_params)):
    report = combined_report(store.snapshot(), params)
    return _dump(Report(message="Combined response", data=report))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
