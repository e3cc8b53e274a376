"""
api/main.py — FastAPI entry point.

Lifespan:
  - Builds one PipelineCalculator from Settings and stores it on app.state
  - The adapters are stateless, so the same instance serves every request

CalcError raised by /tokenize and /parse is mapped to 422 with
{"code", "message", "position"}; /calc reports errors in its body.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.calculator.pipeline_calculator import build_calculator
from api.routers import calc, parse, tokenize
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from contracts import CalcError

logger = logging.getLogger("intcalc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.calculator = build_calculator(settings)
    logger.info(
        "IntCalc API ready (%d-bit integers, overflow=%s).",
        settings.int_bits,
        settings.overflow_policy,
    )
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(calc.router)
    app.include_router(tokenize.router)
    app.include_router(parse.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Global error handler
    @app.exception_handler(CalcError)
    async def calc_error_handler(request: Request, exc: CalcError):
        logger.debug("%s %s -> %r", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.model_validate(exc.to_failure().model_dump()).model_dump(),
        )

    return app


app = create_app()
