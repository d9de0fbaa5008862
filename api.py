"""
Numero — FastAPI Server
========================

RESTful API for converting between numbers and English numerals.

Endpoints:
    POST /convert           Convert one number or numeral
    POST /convert/batch     Convert many inputs, results in input order
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numero import __version__
from numero.batch import convert_batch, count_failures
from numero.converter import Converter
from numero.exceptions import ConversionError
from numero.models import ConversionDirection, ConversionOptions, ConversionResult, NamingSystem

# ─── Application Lifespan (pre-warm converter) ──────────────────────

_converter: Converter | None = None

_MAX_BATCH_SIZE = 10_000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Pre-warm the converter (compile the default number pattern) on startup."""
    global _converter  # noqa: PLW0603
    _converter = Converter()
    _converter.number_pattern()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numero API",
    description=(
        "Converts decimal numbers to English numerals and back. "
        "Short and long scale up to centillion, signed values, decimals "
        "and scientific notation."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    input: str = Field(
        ...,
        min_length=1,
        description="A number (e.g. '1,234.5') or a numeral (e.g. 'twenty-one').",
        json_schema_extra={"example": "twelve million eighty-three thousand fifty-six"},
    )
    options: Optional[ConversionOptions] = None


class ConvertResponse(BaseModel):
    input: str
    output: str
    direction: ConversionDirection


class BatchRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    inputs: list[str] = Field(..., min_length=1, max_length=_MAX_BATCH_SIZE)
    options: Optional[ConversionOptions] = None
    jobs_count: int = Field(default=1, ge=1, le=64)


class BatchResponse(BaseModel):
    results: list[ConversionResult]
    failure_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    naming_systems: list[str]


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> Converter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _error_detail(error: ConversionError) -> dict:
    return {"code": error.code, "message": str(error), "details": error.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to a numeral or a numeral to a number",
    tags=["Conversion"],
    responses={
        422: {"description": "Input is not convertible"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Numbers are spelled out; anything else is parsed as a numeral.

    Conversion errors come back as **422** with a machine-readable `code`
    (e.g. `UNKNOWN_TERM`, `OUT_OF_ORDER_MAGNITUDE`).
    """
    converter = _get_converter()
    options = converter.options if request.options is None else request.options

    if converter.is_number(request.input, options):
        direction = ConversionDirection.TO_NUMERAL
    else:
        direction = ConversionDirection.TO_NUMBER

    try:
        output = converter.convert(request.input, options)
    except ConversionError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))

    return ConvertResponse(input=request.input, output=output, direction=direction)


@app.post(
    "/convert/batch",
    summary="Convert many inputs at once",
    tags=["Conversion"],
    responses={503: {"description": "Converter not yet initialised"}},
)
async def convert_many(request: BatchRequest) -> BatchResponse:
    """Convert every input; failures are reported per input, never for the whole batch."""
    converter = _get_converter()
    if request.options is not None:
        converter = Converter(request.options)

    results = await asyncio.to_thread(convert_batch, request.inputs, converter, request.jobs_count)
    return BatchResponse(results=results, failure_count=count_failures(results))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        naming_systems=[NamingSystem.SHORT_SCALE.value, NamingSystem.LONG_SCALE.value],
    )
