"""
Currency Formatter — FastAPI Server
====================================

HTTP surface for amount formatting and Persian number-to-words conversion.

Endpoints:
    POST /format      Group digits with thousands separators
    POST /unformat    Read a formatted amount back to a number
    POST /words       Persian words (plain and with unit) for an amount
    GET  /health      Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from currency_formatter import __version__
from currency_formatter.config import load_options
from currency_formatter.exceptions import CurrencyFormatterError
from currency_formatter.formatter import CurrencyFormatter
from currency_formatter.models import AmountRendering

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan ───────────────────────────────────────────

_formatter: CurrencyFormatter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the formatter from environment options on startup."""
    global _formatter  # noqa: PLW0603
    _formatter = CurrencyFormatter(load_options())
    logger.info("Currency formatter ready (unit=%s)", _formatter.options.unit_name)
    yield
    _formatter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Currency Formatter API",
    description=(
        "Thousands-separator formatting of amounts and conversion of "
        "numbers to Persian words, with an optional currency/unit name."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

AmountInput = Optional[Union[Decimal, str]]


class FormatRequest(BaseModel):
    """Request body for the /format endpoint."""

    value: AmountInput = Field(
        default=None,
        description="Amount as a number or numeric string (Persian digits allowed).",
        json_schema_extra={"example": "1234567.891"},
    )
    decimal_places: Optional[int] = Field(default=None, ge=0, le=8)


class FormatResponse(BaseModel):
    formatted: str = Field(description='Grouped amount; "" when the input is not a number')


class UnformatRequest(BaseModel):
    """Request body for the /unformat endpoint."""

    formatted: str = Field(..., json_schema_extra={"example": "1,234,567.89"})
    strict: bool = Field(
        default=False,
        description="Reject unparseable input with 422 instead of returning 0.",
    )


class UnformatResponse(BaseModel):
    value: Decimal


class WordsRequest(BaseModel):
    """Request body for the /words endpoint."""

    value: AmountInput = Field(default=None, json_schema_extra={"example": "-5.25"})
    unit_name: Optional[str] = Field(default=None, min_length=1)
    decimal_places: Optional[int] = Field(default=None, ge=0, le=8)


class HealthResponse(BaseModel):
    status: str
    version: str
    decimal_places: int
    unit_name: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_formatter() -> CurrencyFormatter:
    if _formatter is None:
        raise HTTPException(status_code=503, detail="Formatter not initialised")
    return _formatter


@app.exception_handler(CurrencyFormatterError)
async def _formatter_error_handler(request: Request, exc: CurrencyFormatterError) -> JSONResponse:
    logger.warning("%s %s failed: [%s] %s", request.method, request.url.path, exc.code, exc)
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/format",
    summary="Format an amount with thousands separators",
    tags=["Formatting"],
    responses={503: {"description": "Formatter not yet initialised"}},
)
def format_amount(request: FormatRequest) -> FormatResponse:
    """Round to `decimal_places` (default from configuration) and group digits.

    A fraction that rounds to zero is dropped: `100.001` → `"100"`.
    """
    formatter = _get_formatter()
    return FormatResponse(formatted=formatter.format_number(request.value, request.decimal_places))


@app.post(
    "/unformat",
    summary="Parse a formatted amount",
    tags=["Formatting"],
    responses={
        422: {"description": "Unparseable input in strict mode"},
        503: {"description": "Formatter not yet initialised"},
    },
)
def unformat_amount(request: UnformatRequest) -> UnformatResponse:
    """Strip separators and read the number; lenient mode maps garbage to 0."""
    formatter = _get_formatter()
    return UnformatResponse(
        value=formatter.parse_formatted_number(request.formatted, strict=request.strict)
    )


@app.post(
    "/words",
    summary="Convert an amount to Persian words",
    tags=["Words"],
    responses={
        422: {"description": "Amount too large to spell out"},
        503: {"description": "Formatter not yet initialised"},
    },
)
def amount_words(request: WordsRequest) -> AmountRendering:
    """Return the formatted amount, its Persian words, and words with the unit.

    - **words**: e.g. `منفی پنج ممیز بیست و پنج`
    - **words_with_unit**: the same followed by `unit_name` (default from configuration)
    """
    formatter = _get_formatter()
    return formatter.render(request.value, request.unit_name, request.decimal_places)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Formatter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    formatter = _get_formatter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        decimal_places=formatter.options.decimal_places,
        unit_name=formatter.options.unit_name,
    )
